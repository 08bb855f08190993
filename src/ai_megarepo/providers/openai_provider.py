"""
OpenAI Provider.

Wraps the ``AsyncOpenAI`` client behind two calls: single-turn chat
generation and text embedding.

Usage:
    from ai_megarepo.config import load_settings
    from ai_megarepo.providers.openai_provider import OpenAIProvider

    async with OpenAIProvider(load_settings()) as provider:
        text = await provider.generate_text("What is the capital of France?")
"""

from typing import Optional

from openai import AsyncOpenAI

from .base import BaseProvider, EmbeddingVector, GenerationOptions
from ..config import Settings
from ..errors import ConfigurationError
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

EMBEDDING_MODEL = "text-embedding-ada-002"


class OpenAIProvider(BaseProvider):
    """Facade over the OpenAI chat-completions and embeddings endpoints."""

    display_name = "OpenAI"

    def __init__(self, settings: Settings) -> None:
        """
        Args:
            settings: Application settings. ``openai_api_key`` must be set;
                      ``openai_model`` is the default chat model.

        Raises:
            ConfigurationError: If the OpenAI API key is empty
        """
        if not settings.openai_api_key:
            raise ConfigurationError("OpenAI API key is required")

        self._model = settings.openai_model
        self._client = AsyncOpenAI(api_key=settings.openai_api_key)
        logger.info("Initialized OpenAIProvider (model=%s)", self._model)

    async def generate_text(
        self,
        prompt: str,
        options: Optional[GenerationOptions] = None,
    ) -> str:
        """Send ``prompt`` as the only user message and return the reply.

        Args:
            prompt: User message to send.
            options: Optional model / max_tokens / temperature overrides.

        Returns:
            Content of the first choice, or ``""`` if the API returned none.

        Raises:
            ProviderError: If the API call fails.
        """
        resolved = (options or GenerationOptions()).resolve(self._model)

        try:
            response = await self._client.chat.completions.create(
                model=resolved.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=resolved.max_tokens,
                temperature=resolved.temperature,
            )
        except Exception as e:
            self._raise_provider_error("generate_text", e)

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def generate_embedding(self, text: str) -> EmbeddingVector:
        """Embed ``text`` with ``text-embedding-ada-002``.

        Returns:
            The first embedding vector, or ``[]`` if the response has none.

        Raises:
            ProviderError: If the API call fails.
        """
        try:
            response = await self._client.embeddings.create(
                model=EMBEDDING_MODEL,
                input=text,
            )
        except Exception as e:
            self._raise_provider_error("generate_embedding", e)

        if not response.data:
            return []
        return list(response.data[0].embedding or [])

    def get_provider_name(self) -> str:
        return "openai"

    async def close(self) -> None:
        await self._client.close()
