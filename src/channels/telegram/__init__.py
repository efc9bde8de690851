"""
Telegram Channel Module.

Handles Telegram bot integration for listing search.
"""

from src.channels.telegram.bot import TelegramBot
from src.channels.telegram.formatter import TelegramFormatter, get_telegram_formatter
from src.channels.telegram.handler import TelegramHandler

__all__ = [
    "TelegramBot",
    "TelegramHandler",
    "TelegramFormatter",
    "get_telegram_formatter",
]
