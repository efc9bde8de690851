"""
Chat Commands Module.

Slash commands shared by the chat channels: /start, /help and /search.
"""

from src.channels.commands.base import BaseCommand, CommandResult
from src.channels.commands.help import HelpCommand
from src.channels.commands.registry import COMMANDS, get_command, parse_command
from src.channels.commands.search import SearchCommand
from src.channels.commands.start import StartCommand

__all__ = [
    "BaseCommand",
    "CommandResult",
    "StartCommand",
    "HelpCommand",
    "SearchCommand",
    "COMMANDS",
    "get_command",
    "parse_command",
]
