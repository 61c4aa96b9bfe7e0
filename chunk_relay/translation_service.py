"""This module contains the client for the remote speech translation service"""

import logging

import httpx

from .config import Settings
from .exceptions import ConfigurationError, RemoteServiceError, TransportError

logger = logging.getLogger(__name__)


class TranslationClient:
    """Sends one audio chunk to the translation endpoint and returns the translated text."""

    def __init__(
        self,
        api_key: str,
        url: str,
        model: str = "whisper-1",
        response_format: str = "text",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self.model = model
        self.response_format = response_format
        self.timeout = timeout
        # Tests swap in an httpx.MockTransport
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "TranslationClient":
        """Build a client from the application settings."""
        return cls(
            api_key=settings.openai_api_key,
            url=settings.translation_url,
            model=settings.translation_model,
            response_format=settings.translation_response_format,
            timeout=settings.translation_timeout_seconds,
        )

    async def translate(self, buffer: bytes, filename: str) -> str:
        """Translate the speech in buffer into target-language text.

        A single attempt is made; retrying is left to the caller.

        Raises:
            ConfigurationError: no API key is configured (nothing is sent).
            RemoteServiceError: the service answered with a non-2xx status.
            TransportError: the service could not be reached, timed out, or sent an undecodable reply.
        """
        if not self.api_key:
            raise ConfigurationError("OPENAI_API_KEY")

        data = {"model": self.model, "response_format": self.response_format}
        files = {"file": (filename, buffer)}
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, data=data, files=files, headers=headers)
        except httpx.RequestError as e:
            raise TransportError(self.url, e) from e

        if not response.is_success:
            raise RemoteServiceError(response.status_code, response.text)

        text = response.text.strip()
        logger.info("Chunk translated", extra={"audio_bytes": len(buffer), "text_length": len(text)})
        return text
