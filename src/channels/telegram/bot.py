"""
Telegram Bot Module.

Wraps the python-telegram-bot client used to answer chats.
"""

import html
import re
from typing import Any, Optional

from loguru import logger
from telegram import Bot, LinkPreviewOptions
from telegram.constants import ParseMode
from telegram.error import BadRequest, TelegramError

from config.settings import get_settings

tg_log = logger.bind(module="TelegramBot")

_TAG = re.compile(r"</?b>")
NO_PREVIEW = LinkPreviewOptions(is_disabled=True)


def strip_html(text: str) -> str:
    """Turn formatter HTML back into plain text."""
    return html.unescape(_TAG.sub("", text))


class TelegramBot:
    """Process-wide Telegram client."""

    _instance: Optional["TelegramBot"] = None
    _bot: Bot | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def init(cls, token: str | None = None) -> "TelegramBot":
        """
        Create the client once.

        Args:
            token: Bot token (defaults to TELEGRAM_BOT_TOKEN from settings)

        Returns:
            TelegramBot instance, unconfigured if no token is available
        """
        instance = cls()
        if instance._bot is not None:
            return instance

        bot_token = token or get_settings().telegram.bot_token
        if not bot_token:
            tg_log.warning("TELEGRAM_BOT_TOKEN not set")
            return instance

        instance._bot = Bot(token=bot_token)
        tg_log.info("Telegram bot initialized")
        return instance

    @classmethod
    def get_instance(cls) -> Optional["TelegramBot"]:
        return cls._instance

    @property
    def bot(self) -> Bot | None:
        return self._bot

    @property
    def is_configured(self) -> bool:
        return self._bot is not None

    async def send_message(
        self,
        chat_id: int | str,
        text: str,
        reply_markup: Any | None = None,
    ) -> bool:
        """
        Send an HTML message, resending as plain text if Telegram rejects the markup.

        Args:
            chat_id: Target chat ID
            text: HTML message text
            reply_markup: Inline keyboard markup

        Returns:
            True if sent successfully
        """
        if not self._bot:
            tg_log.warning("Bot not configured, cannot send message")
            return False

        try:
            await self._bot.send_message(
                chat_id=chat_id,
                text=text,
                parse_mode=ParseMode.HTML,
                link_preview_options=NO_PREVIEW,
                reply_markup=reply_markup,
            )
            return True
        except BadRequest as e:
            tg_log.warning(f"HTML rejected for {chat_id} ({e}), sending plain text")
        except TelegramError as e:
            tg_log.error(f"Failed to send message to {chat_id}: {e}")
            return False

        try:
            await self._bot.send_message(
                chat_id=chat_id,
                text=strip_html(text),
                link_preview_options=NO_PREVIEW,
                reply_markup=reply_markup,
            )
            return True
        except TelegramError as e:
            tg_log.error(f"Failed to send plain message to {chat_id}: {e}")
            return False

    async def send_chunks(
        self,
        chat_id: int | str,
        chunks: list[str],
        reply_markup: Any | None = None,
    ) -> bool:
        """Send consecutive messages; the keyboard is attached to the last one."""
        sent = True
        for i, chunk in enumerate(chunks):
            markup = reply_markup if i == len(chunks) - 1 else None
            sent = await self.send_message(chat_id, chunk, reply_markup=markup) and sent
        return sent
