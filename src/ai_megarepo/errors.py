"""
Exception types raised by AI Megarepo.

Providers log a failure once at their boundary and then raise one of these;
callers decide the final handling. Nothing here is retried.
"""

from typing import Optional


class AIMegarepoError(Exception):
    """Base class for all AI Megarepo errors."""


class ConfigurationError(AIMegarepoError, ValueError):
    """A required credential is missing or a setting is malformed."""


class ValidationError(AIMegarepoError, ValueError):
    """Caller input was rejected before any work was done."""


class ProviderError(AIMegarepoError):
    """
    A remote provider call failed.

    Network, auth, rate-limit and malformed-response failures all surface
    as this one type. The original exception is chained (``__cause__``)
    and also kept on ``cause``.

    Attributes:
        provider: Short provider tag (e.g. 'openai', 'huggingface')
        operation: Facade operation that failed (e.g. 'generate_text')
        cause: The exception raised by the SDK
    """

    def __init__(
        self,
        provider: str,
        operation: str,
        cause: Optional[BaseException] = None,
    ):
        self.provider = provider
        self.operation = operation
        self.cause = cause
        message = f"{provider} {operation} failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
