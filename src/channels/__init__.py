"""
Chat Channels Module.

Chat channels that answer listing searches (Telegram).
"""

from src.channels.base import BaseFormatter
from src.channels.telegram import (
    TelegramBot,
    TelegramHandler,
    TelegramFormatter,
    get_telegram_formatter,
)

__all__ = [
    # Base classes
    "BaseFormatter",
    # Telegram
    "TelegramBot",
    "TelegramHandler",
    "TelegramFormatter",
    "get_telegram_formatter",
]
