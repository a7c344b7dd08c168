"""
Application settings module.

Manages all configuration via environment variables using pydantic-settings.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotSettings(BaseSettings):
    """Command dispatch settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BOT_", extra="ignore")

    direct_channel_prefix: str = "D"  # Channel IDs starting with this are one-to-one chats
    help_command: str = "help"
    help_description: str = "Show this help message"
    strip_mention: bool = True
    ignore_bot_messages: bool = True

    # 0 = unbounded
    max_concurrent_handlers: int = Field(0, ge=0)

    @field_validator("direct_channel_prefix")
    @classmethod
    def validate_direct_channel_prefix(cls, v: str) -> str:
        """Validate the direct channel prefix is not empty."""
        if not v:
            raise ValueError("direct_channel_prefix must not be empty")
        return v

    @field_validator("help_command")
    @classmethod
    def validate_help_command(cls, v: str) -> str:
        """Validate the help command is a single word."""
        if not v or " " in v:
            raise ValueError("help_command must be a single word")
        return v


class TelegramSettings(BaseSettings):
    """Telegram bot settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TELEGRAM_", extra="ignore")

    bot_token: str = ""
    poll_timeout: int = 30     # Long polling timeout in seconds
    retry_delay: float = 5.0   # Wait after a failed poll


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    bot: BotSettings = BotSettings()
    telegram: TelegramSettings = TelegramSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
