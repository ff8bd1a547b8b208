"""Configuration for DailyTodos."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_API_URL = "https://api.telegram.org"

REQUIRED_ENV = {
    "telegram_bot_token": "TELEGRAM_BOT_TOKEN",
    "telegram_chat_id": "TELEGRAM_CHAT_ID",
}


def is_blank(value: str | None) -> bool:
    """Check whether a setting is absent, empty or whitespace-only."""
    return not value or not value.strip()


class Config(BaseSettings):
    """Application configuration, read from environment variables.

    The time zone (Asia/Ho_Chi_Minh) and the message length cap are fixed
    in clock.py and message_builder.py, not configurable.
    """

    telegram_bot_token: str | None = Field(default=None)
    telegram_chat_id: str | None = Field(default=None)
    telegram_api_url: str = Field(default=DEFAULT_API_URL)
    projects_dir: Path = Field(default=Path("projects"))
    send_delay_seconds: float = Field(default=0.5)

    def missing_fields(self) -> list[str]:
        """Return env names of required settings that are absent or blank."""
        return [
            env_name
            for field_name, env_name in REQUIRED_ENV.items()
            if is_blank(getattr(self, field_name))
        ]


class MissingConfigError(RuntimeError):
    """Raised when required settings are absent."""

    def __init__(self, missing: list[str]) -> None:
        """Initialize with the env names that are missing."""
        self.missing = missing
        super().__init__(f"Missing required environment variables: {', '.join(missing)}")
