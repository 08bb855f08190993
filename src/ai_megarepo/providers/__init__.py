"""
Hosted Provider Facades

This package wraps hosted AI APIs (OpenAI, Hugging Face) behind small
facade classes that share one error and logging policy.
"""

from .base import (
    BaseProvider,
    ClassificationResult,
    EmbeddingVector,
    GenerationOptions,
    LabelScore,
)
from .openai_provider import OpenAIProvider
from .huggingface_provider import HuggingFaceProvider
from .factory import ProviderFactory

__all__ = [
    "BaseProvider",
    "ClassificationResult",
    "EmbeddingVector",
    "GenerationOptions",
    "LabelScore",
    "OpenAIProvider",
    "HuggingFaceProvider",
    "ProviderFactory",
]
