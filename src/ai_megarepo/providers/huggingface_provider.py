"""
Hugging Face Provider.

Wraps ``huggingface_hub.AsyncInferenceClient`` behind three calls: text
generation, feature extraction (embedding) and zero-shot classification.
Embedding and classification payloads are normalized through
``response_decoding``.

The API token may be empty. It is not validated locally; an unauthorized
request fails at the hub and surfaces as ``ProviderError``.
"""

from typing import List, Optional

from huggingface_hub import AsyncInferenceClient

from .base import (
    BaseProvider,
    ClassificationResult,
    EmbeddingVector,
    GenerationOptions,
)
from .response_decoding import (
    decode_feature_extraction,
    decode_zero_shot_classification,
)
from ..config import Settings
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

EMBEDDING_MODEL = "sentence-transformers/all-MiniLM-L6-v2"
CLASSIFICATION_MODEL = "facebook/bart-large-mnli"


class HuggingFaceProvider(BaseProvider):
    """Facade over the Hugging Face inference endpoints."""

    display_name = "Hugging Face"

    def __init__(self, settings: Settings) -> None:
        """
        Args:
            settings: Application settings. ``huggingface_api_key`` is passed
                      through as the hub token; ``huggingface_model`` is the
                      default text-generation model.
        """
        self._model = settings.huggingface_model
        # None lets the hub client fall back to a locally stored token
        self._client = AsyncInferenceClient(token=settings.huggingface_api_key or None)
        logger.info("Initialized HuggingFaceProvider (model=%s)", self._model)

    async def generate_text(
        self,
        prompt: str,
        options: Optional[GenerationOptions] = None,
    ) -> str:
        """Generate a continuation of ``prompt``.

        ``options.max_tokens`` is sent as ``max_new_tokens``.

        Returns:
            The generated text, verbatim.

        Raises:
            ProviderError: If the hub call fails.
        """
        resolved = (options or GenerationOptions()).resolve(self._model)

        try:
            response = await self._client.text_generation(
                prompt,
                model=resolved.model,
                max_new_tokens=resolved.max_tokens,
                temperature=resolved.temperature,
            )
        except Exception as e:
            self._raise_provider_error("generate_text", e)

        # Without details the hub client returns the generated string itself
        return response

    async def get_embedding(self, text: str) -> EmbeddingVector:
        """Embed ``text`` with ``all-MiniLM-L6-v2``.

        Returns:
            A flat vector. For a 2-D result only the first row is returned;
            an empty or unrecognized result gives ``[]``.

        Raises:
            ProviderError: If the hub call fails.
        """
        try:
            response = await self._client.feature_extraction(
                text,
                model=EMBEDDING_MODEL,
            )
        except Exception as e:
            self._raise_provider_error("get_embedding", e)

        decoded = decode_feature_extraction(response)
        logger.debug("Decoded feature extraction as %s", type(decoded).__name__)
        return decoded.to_vector()

    async def classify_text(
        self,
        text: str,
        labels: List[str],
    ) -> ClassificationResult:
        """Score ``text`` against candidate ``labels`` with BART-MNLI.

        Returns:
            ``LabelScore`` pairs in the order the hub returned them, or
            ``[]`` if the response has no labels/scores.

        Raises:
            ProviderError: If the hub call fails.
        """
        try:
            response = await self._client.zero_shot_classification(
                text,
                candidate_labels=list(labels),
                model=CLASSIFICATION_MODEL,
            )
        except Exception as e:
            self._raise_provider_error("classify_text", e)

        return decode_zero_shot_classification(response)

    def get_provider_name(self) -> str:
        return "huggingface"

    async def close(self) -> None:
        await self._client.close()
