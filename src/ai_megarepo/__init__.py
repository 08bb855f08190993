"""
AI Megarepo - Core Package

Thin facades over hosted and local AI libraries.

This package provides:
- Settings loaded once from the environment
- Hosted provider facades (OpenAI, Hugging Face)
- A local TensorFlow linear-regression helper
"""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .errors import (
    AIMegarepoError,
    ConfigurationError,
    ProviderError,
    ValidationError,
)
from .providers import (
    GenerationOptions,
    HuggingFaceProvider,
    LabelScore,
    OpenAIProvider,
    ProviderFactory,
)

__all__ = [
    "Settings",
    "load_settings",
    "AIMegarepoError",
    "ConfigurationError",
    "ProviderError",
    "ValidationError",
    "GenerationOptions",
    "HuggingFaceProvider",
    "LabelScore",
    "OpenAIProvider",
    "ProviderFactory",
]
