"""Telegram webhook routes."""

from typing import Annotated, Optional

from fastapi import APIRouter, Header, HTTPException, Request
from loguru import logger
from telegram import Update
from telegram.error import TelegramError

from config.settings import get_settings
from src.channels.telegram import TelegramBot, TelegramHandler
from src.search import get_search_service

webhook_log = logger.bind(module="Webhook")

router = APIRouter(prefix="/webhook/telegram", tags=["Telegram"])

WEBHOOK_PATH = "/webhook/telegram"

_bot: Optional[TelegramBot] = None
_handler: Optional[TelegramHandler] = None


async def init_bot() -> Optional[TelegramBot]:
    """
    Create the bot and its update handler.

    Returns:
        TelegramBot, or None if no token is configured
    """
    global _bot, _handler

    bot = TelegramBot.init(get_settings().telegram.bot_token)
    if not bot.is_configured:
        webhook_log.warning("Telegram bot token not configured, chat channel disabled")
        return None

    _bot = bot
    _handler = TelegramHandler(bot=bot, service=get_search_service())

    try:
        me = await bot.bot.get_me()
        webhook_log.info(f"Telegram bot initialized: @{me.username}")
    except TelegramError as e:
        webhook_log.error(f"Telegram get_me failed: {e}")

    return bot


def _require_bot() -> TelegramBot:
    if not _bot or not _bot.bot:
        raise HTTPException(status_code=503, detail="Bot not configured")
    return _bot


@router.post("")
async def telegram_webhook(
    request: Request,
    secret: Annotated[Optional[str], Header(alias="X-Telegram-Bot-Api-Secret-Token")] = None,
) -> dict:
    """
    Receive a Telegram update.

    Always answers 200 once the secret checks out, so Telegram does not
    redeliver updates that failed inside the handler.
    """
    expected = get_settings().telegram.webhook_secret
    if expected and secret != expected:
        webhook_log.warning("Rejected webhook call with bad secret token")
        raise HTTPException(status_code=403, detail="Invalid secret token")

    if not _bot or not _handler:
        webhook_log.warning("Webhook called but bot is not initialized")
        return {"status": False, "error": "Bot not configured"}

    try:
        update = Update.de_json(await request.json(), _bot.bot)
        await _handler.handle_update(update)
        return {"status": True}
    except Exception as e:
        webhook_log.exception(f"Webhook error: {e}")
        return {"status": False, "error": str(e)}


async def _set_webhook(bot: TelegramBot) -> str:
    """Register this server's webhook URL with Telegram."""
    telegram = get_settings().telegram
    if not telegram.webhook_url:
        raise ValueError("TELEGRAM_WEBHOOK_URL not configured")

    full_url = f"{telegram.webhook_url.rstrip('/')}{WEBHOOK_PATH}"
    await bot.bot.set_webhook(url=full_url, secret_token=telegram.webhook_secret or None)
    return full_url


async def auto_setup_webhook() -> bool:
    """Register the webhook on startup; failures are logged, not raised."""
    if not _bot or not _bot.bot:
        return False

    try:
        full_url = await _set_webhook(_bot)
    except (ValueError, TelegramError) as e:
        webhook_log.warning(f"Webhook auto-setup skipped: {e}")
        return False

    webhook_log.info(f"Webhook auto-setup complete: {full_url}")
    return True


@router.post("/setup")
async def setup_telegram_webhook() -> dict:
    """Register the webhook URL with Telegram."""
    bot = _require_bot()
    try:
        full_url = await _set_webhook(bot)
    except (ValueError, TelegramError) as e:
        webhook_log.error(f"Failed to set webhook: {e}")
        return {"status": False, "error": str(e)}

    webhook_log.info(f"Webhook set to: {full_url}")
    return {"status": True, "webhook_url": full_url}


@router.delete("")
async def delete_telegram_webhook() -> dict:
    """Remove the webhook (switch the bot back to polling)."""
    bot = _require_bot()
    try:
        await bot.bot.delete_webhook()
    except TelegramError as e:
        webhook_log.error(f"Failed to delete webhook: {e}")
        return {"status": False, "error": str(e)}

    webhook_log.info("Webhook deleted")
    return {"status": True, "message": "Webhook deleted"}


@router.get("/info")
async def get_telegram_webhook_info() -> dict:
    """Current webhook registration as reported by Telegram."""
    bot = _require_bot()
    try:
        info = await bot.bot.get_webhook_info()
    except TelegramError as e:
        webhook_log.error(f"Failed to get webhook info: {e}")
        return {"status": False, "error": str(e)}

    return {
        "status": True,
        "webhook": {
            "url": info.url,
            "pending_update_count": info.pending_update_count,
            "last_error_date": info.last_error_date,
            "last_error_message": info.last_error_message,
        },
    }
