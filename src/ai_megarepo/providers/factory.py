"""
Provider Factory - Creates hosted provider instances by name.

This factory enables dynamic provider creation without needing to import
provider classes directly.
"""

from typing import Optional

from .base import BaseProvider
from .huggingface_provider import HuggingFaceProvider
from .openai_provider import OpenAIProvider
from ..config import Settings


class ProviderFactory:
    """
    Factory for creating hosted provider instances.

    Usage:
        factory = ProviderFactory(load_settings())
        provider = factory.create("openai")
    """

    _PROVIDERS = {
        "openai": OpenAIProvider,
        "huggingface": HuggingFaceProvider,
    }

    def __init__(self, settings: Optional[Settings] = None):
        """
        Args:
            settings: Settings passed to every provider created. Defaults to
                      ``Settings.from_env()``.
        """
        self.settings = settings or Settings.from_env()

    def create(self, provider_name: str) -> BaseProvider:
        """
        Create a provider instance.

        Args:
            provider_name: 'openai' or 'huggingface' (case-insensitive)

        Returns:
            BaseProvider instance

        Raises:
            ValueError: If provider_name is unknown
            ConfigurationError: If the provider's credentials are missing
        """
        provider_cls = self._PROVIDERS.get(provider_name.lower())
        if provider_cls is None:
            raise ValueError(
                f"Unknown provider: {provider_name}. "
                f"Available providers: {', '.join(self.get_available_providers())}"
            )
        return provider_cls(self.settings)

    @classmethod
    def get_available_providers(cls) -> list[str]:
        """Return list of supported provider names."""
        return list(cls._PROVIDERS)

    def get_configured_providers(self) -> list[str]:
        """Return list of providers that have credentials configured."""
        return self.settings.get_available_providers()
