"""
Application settings module.

Manages all configuration via environment variables using pydantic-settings.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class ListingSettings(BaseSettings):
    """Listing data source settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LISTINGS_", extra="ignore")

    source_url: str = ""  # LISTINGS_SOURCE_URL, takes precedence over source_path
    source_path: str = "data/listings.json"
    timeout: float = 10.0

    @property
    def use_http(self) -> bool:
        """Whether listings are fetched over HTTP."""
        return bool(self.source_url)


class TelegramSettings(BaseSettings):
    """Telegram bot settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TELEGRAM_", extra="ignore")

    bot_token: str = ""
    webhook_url: str = ""  # public base URL, /webhook/telegram is appended
    webhook_secret: str = ""  # echoed back by Telegram in X-Telegram-Bot-Api-Secret-Token


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    cors_origins: str = "*"  # comma-separated
    web_app_url: str = ""  # advisor web app opened from the bot keyboard

    listings: ListingSettings = ListingSettings()
    telegram: TelegramSettings = TelegramSettings()

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
