"""Telegram Bot API notifier."""

import logging
from typing import Any, Protocol

import httpx

from daily_todos.config import DEFAULT_API_URL, MissingConfigError, is_blank
from daily_todos.telegram.message_builder import MAX_MESSAGE_LENGTH, truncate_message

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Protocol for delivering a formatted message."""

    async def send(self, text: str) -> bool:
        """Send a message, returning True if it was acknowledged."""
        ...


class TelegramNotifier:
    """Sends HTML messages to one chat through the sendMessage endpoint."""

    def __init__(
        self,
        bot_token: str | None,
        chat_id: str | None,
        api_url: str = DEFAULT_API_URL,
        max_message_length: int = MAX_MESSAGE_LENGTH,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize notifier.

        Args:
            bot_token: Bot token from @BotFather
            chat_id: Target chat identifier
            api_url: Bot API base URL
            max_message_length: Messages longer than this are truncated
            client: Shared HTTP client; a short-lived one is used per send if omitted

        Raises:
            MissingConfigError: If the token or chat id is blank
        """
        missing = []
        if is_blank(bot_token):
            missing.append("TELEGRAM_BOT_TOKEN")
        if is_blank(chat_id):
            missing.append("TELEGRAM_CHAT_ID")
        if missing:
            raise MissingConfigError(missing)

        self._url = f"{api_url.rstrip('/')}/bot{bot_token}/sendMessage"
        self._chat_id = chat_id
        self._max_message_length = max_message_length
        self._client = client

    def _build_payload(self, text: str) -> dict[str, Any]:
        """Build the sendMessage JSON body."""
        return {
            "chat_id": self._chat_id,
            "text": truncate_message(text, self._max_message_length),
            "parse_mode": "HTML",
            "disable_web_page_preview": True,
        }

    async def send(self, text: str) -> bool:
        """Send a message to the configured chat.

        Returns:
            True if Telegram acknowledged the message with ok=true. Transport
            and decoding errors are logged and reported as False.
        """
        payload = self._build_payload(text)

        try:
            if self._client is not None:
                response = await self._client.post(self._url, json=payload)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(self._url, json=payload)
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[Notifier] Failed to send message: {e}")
            return False

        if not isinstance(data, dict) or data.get("ok") is not True:
            description = data.get("description") if isinstance(data, dict) else data
            logger.error(f"[Notifier] Telegram API error: {description}")
            return False

        return True
