"""
Base classes and shared types for the hosted provider facades.

Each facade wraps one SDK client. Methods forward caller arguments into a
single SDK call, reshape the response into the plain types defined here,
and on failure log once and raise ``ProviderError``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, NoReturn, Optional

from ..errors import ProviderError
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

EmbeddingVector = List[float]

DEFAULT_MAX_TOKENS = 100
DEFAULT_TEMPERATURE = 0.7


@dataclass(frozen=True)
class GenerationOptions:
    """
    Per-call overrides for text generation.

    Any field left as ``None`` falls back to the provider's default
    (configured model, 100 tokens, temperature 0.7).
    """
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None

    def resolve(self, default_model: str) -> "ResolvedGenerationOptions":
        """Fill in defaults for every field left unset."""
        return ResolvedGenerationOptions(
            model=self.model if self.model is not None else default_model,
            max_tokens=(
                self.max_tokens if self.max_tokens is not None else DEFAULT_MAX_TOKENS
            ),
            temperature=(
                self.temperature if self.temperature is not None else DEFAULT_TEMPERATURE
            ),
        )


@dataclass(frozen=True)
class ResolvedGenerationOptions:
    model: str
    max_tokens: int
    temperature: float


@dataclass(frozen=True)
class LabelScore:
    """One zero-shot classification outcome."""
    label: str
    score: float


ClassificationResult = List[LabelScore]


class BaseProvider(ABC):
    """
    Abstract base class for hosted provider facades.

    Subclasses own a single SDK client and release it in ``close()``.
    """

    #: Human-readable tag used in log messages.
    display_name: str = "Provider"

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider (e.g. ``'openai'``)."""

    @abstractmethod
    async def close(self) -> None:
        """Release any underlying resources (HTTP clients, etc.)."""

    def _raise_provider_error(self, operation: str, error: Exception) -> NoReturn:
        """Log a failed SDK call once and raise it as ``ProviderError``."""
        logger.error("%s %s error: %s", self.display_name, operation, error)
        raise ProviderError(self.get_provider_name(), operation, error) from error

    # Context-manager support
    async def __aenter__(self) -> "BaseProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
