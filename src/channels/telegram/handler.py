"""
Telegram Handler Module.

Routes incoming Telegram updates to commands or the listing search.
"""

from typing import Optional

from loguru import logger
from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update, WebAppInfo

from config.settings import get_settings
from src.channels.telegram.bot import TelegramBot
from src.channels.telegram.formatter import TelegramFormatter, get_telegram_formatter
from src.channels.commands import COMMANDS, BaseCommand, parse_command
from src.search.service import ListingSearchService

handler_log = logger.bind(module="TelegramHandler")

# Command results that get the "open web app" button
WEB_APP_TITLES = ("welcome", "help")


class TelegramHandler:
    """Handler for routing Telegram updates to commands and search."""

    # Service identifier for this channel
    SERVICE_NAME = "telegram"

    def __init__(
        self,
        bot: TelegramBot,
        service: ListingSearchService,
        web_app_url: Optional[str] = None,
    ):
        """
        Initialize handler.

        Args:
            bot: TelegramBot instance
            service: Listing search service for free-text messages
            web_app_url: Advisor web app URL (defaults to WEB_APP_URL setting)
        """
        self._bot = bot
        self._service = service
        self._web_app_url = get_settings().web_app_url if web_app_url is None else web_app_url
        self._formatter: TelegramFormatter = get_telegram_formatter()
        self._commands: dict[str, BaseCommand] = {
            name: command_class(service=service) for name, command_class in COMMANDS.items()
        }
        handler_log.debug(f"Registered {len(self._commands)} commands")

    async def handle_update(self, update: Update) -> bool:
        """
        Handle an incoming Telegram update.

        Args:
            update: Telegram Update object

        Returns:
            True if handled successfully
        """
        if not update.message:
            handler_log.debug("Update has no message, skipping")
            return True

        chat_id = update.message.chat_id
        text = update.message.text or ""
        user = update.message.from_user

        username = (user.username or str(user.id)) if user else "unknown"
        handler_log.info(f"Message from {username}: {text}")

        parsed = parse_command(text)
        if parsed:
            command_name, args = parsed
            return await self._execute_command(chat_id, command_name, args)

        return await self._handle_text(chat_id, text)

    async def _execute_command(self, chat_id: int, command_name: str, args: str) -> bool:
        """Run a registered command and send its formatted result."""
        command = self._commands[command_name]

        try:
            result = await command.execute(str(chat_id), args, {"service": self.SERVICE_NAME})
        except Exception as e:
            handler_log.error(f"Command {command_name} error: {e}")
            await self._bot.send_message(
                chat_id, "❌ 명령 실행에 실패했습니다. 잠시 후 다시 시도해주세요."
            )
            return False

        response = self._formatter.format_command_result(result)
        return await self._send(chat_id, response, self._get_reply_markup(result.title))

    def _get_reply_markup(self, title: Optional[str]) -> Optional[InlineKeyboardMarkup]:
        """Web app button for welcome/help results, if a web app is configured."""
        if not self._web_app_url or title not in WEB_APP_TITLES:
            return None

        return InlineKeyboardMarkup([[
            InlineKeyboardButton("🏠 어디살래 열기", web_app=WebAppInfo(url=self._web_app_url))
        ]])

    async def _handle_text(self, chat_id: int, text: str) -> bool:
        """Answer a non-command message with the listing search."""
        response = await self._service.handle_user_query(text)
        return await self._send(chat_id, self._formatter.format_response(response))

    async def _send(
        self,
        chat_id: int,
        text: str,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> bool:
        chunks = self._formatter.split_message(text)
        return await self._bot.send_chunks(chat_id, chunks, reply_markup=reply_markup)
