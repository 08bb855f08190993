"""Tests for HuggingFaceProvider."""

import numpy as np
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from ai_megarepo.config import Settings
from ai_megarepo.errors import ProviderError
from ai_megarepo.providers.base import GenerationOptions, LabelScore
from ai_megarepo.providers.huggingface_provider import (
    CLASSIFICATION_MODEL,
    EMBEDDING_MODEL,
    HuggingFaceProvider,
)


@pytest.fixture
def provider(settings):
    """Create a HuggingFaceProvider with mocked client."""
    with patch(
        "ai_megarepo.providers.huggingface_provider.AsyncInferenceClient"
    ) as MockClient:
        mock_client = AsyncMock()
        MockClient.return_value = mock_client
        prov = HuggingFaceProvider(settings)
        prov._mock_client = mock_client
        yield prov


def test_init_passes_token():
    with patch(
        "ai_megarepo.providers.huggingface_provider.AsyncInferenceClient"
    ) as MockClient:
        HuggingFaceProvider(Settings(huggingface_api_key="hf-abc"))
        MockClient.assert_called_once_with(token="hf-abc")


def test_init_accepts_empty_token():
    """An empty token is not validated locally."""
    with patch(
        "ai_megarepo.providers.huggingface_provider.AsyncInferenceClient"
    ) as MockClient:
        HuggingFaceProvider(Settings(huggingface_api_key=""))
        MockClient.assert_called_once_with(token=None)


@pytest.mark.asyncio
async def test_generate_text_returns_generated_text(provider):
    """The hub client returns a plain string; it is passed back unchanged."""
    provider._mock_client.text_generation = AsyncMock(
        return_value=" and then some"
    )

    result = await provider.generate_text("Once upon a time")

    assert result == " and then some"
    call = provider._mock_client.text_generation.call_args
    assert "details" not in call.kwargs


@pytest.mark.asyncio
async def test_generate_text_uses_defaults(provider):
    provider._mock_client.text_generation = AsyncMock(
        return_value=""
    )

    await provider.generate_text("prompt")

    call = provider._mock_client.text_generation.call_args
    assert call.args == ("prompt",)
    assert call.kwargs["model"] == "microsoft/DialoGPT-medium"
    assert call.kwargs["max_new_tokens"] == 100
    assert call.kwargs["temperature"] == 0.7


@pytest.mark.asyncio
async def test_generate_text_forwards_options(provider):
    provider._mock_client.text_generation = AsyncMock(
        return_value=""
    )

    await provider.generate_text(
        "prompt",
        GenerationOptions(model="gpt2", max_tokens=20, temperature=1.2),
    )

    call = provider._mock_client.text_generation.call_args
    assert call.kwargs["model"] == "gpt2"
    assert call.kwargs["max_new_tokens"] == 20
    assert call.kwargs["temperature"] == 1.2


@pytest.mark.asyncio
async def test_generate_text_wraps_failure(provider):
    cause = RuntimeError("401 Unauthorized")
    provider._mock_client.text_generation = AsyncMock(side_effect=cause)

    with pytest.raises(ProviderError) as exc_info:
        await provider.generate_text("prompt")

    assert exc_info.value.provider == "huggingface"
    assert exc_info.value.__cause__ is cause
    assert provider._mock_client.text_generation.await_count == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response,expected",
    [
        ([0.1, 0.2, 0.3], [0.1, 0.2, 0.3]),
        ([[0.1, 0.2], [0.3, 0.4]], [0.1, 0.2]),
        ([], []),
        (np.array([0.5, 0.25], dtype=np.float64), [0.5, 0.25]),
        (np.array([[0.5, 0.25], [1.0, 2.0]], dtype=np.float64), [0.5, 0.25]),
    ],
)
async def test_get_embedding_normalizes_shapes(provider, response, expected):
    provider._mock_client.feature_extraction = AsyncMock(return_value=response)

    result = await provider.get_embedding("text")

    assert result == expected
    call = provider._mock_client.feature_extraction.call_args
    assert call.kwargs["model"] == EMBEDDING_MODEL


@pytest.mark.asyncio
async def test_get_embedding_wraps_failure(provider):
    provider._mock_client.feature_extraction = AsyncMock(
        side_effect=TimeoutError("timed out")
    )

    with pytest.raises(ProviderError, match="get_embedding"):
        await provider.get_embedding("text")


@pytest.mark.asyncio
async def test_classify_text_zips_labels_and_scores(provider):
    provider._mock_client.zero_shot_classification = AsyncMock(
        return_value={"labels": ["pos", "neg"], "scores": [0.9, 0.1]}
    )

    result = await provider.classify_text("great!", ["neg", "pos"])

    assert result == [LabelScore("pos", 0.9), LabelScore("neg", 0.1)]
    call = provider._mock_client.zero_shot_classification.call_args
    assert call.kwargs["candidate_labels"] == ["neg", "pos"]
    assert call.kwargs["model"] == CLASSIFICATION_MODEL


@pytest.mark.asyncio
async def test_classify_text_accepts_element_list(provider):
    """The SDK's list-of-elements shape is passed through in order."""
    provider._mock_client.zero_shot_classification = AsyncMock(
        return_value=[
            MagicMock(label="positive", score=0.8),
            MagicMock(label="neutral", score=0.15),
        ]
    )

    result = await provider.classify_text("text", ["positive", "neutral"])

    assert result == [LabelScore("positive", 0.8), LabelScore("neutral", 0.15)]


@pytest.mark.asyncio
async def test_classify_text_missing_field_returns_empty(provider):
    provider._mock_client.zero_shot_classification = AsyncMock(
        return_value={"labels": ["pos", "neg"]}
    )

    assert await provider.classify_text("text", ["pos", "neg"]) == []


@pytest.mark.asyncio
async def test_classify_text_wraps_failure(provider):
    cause = ConnectionError("boom")
    provider._mock_client.zero_shot_classification = AsyncMock(side_effect=cause)

    with pytest.raises(ProviderError) as exc_info:
        await provider.classify_text("text", ["a"])

    assert exc_info.value.cause is cause


def test_get_provider_name(provider):
    assert provider.get_provider_name() == "huggingface"


@pytest.mark.asyncio
async def test_close_delegates(provider):
    await provider.close()
    provider._mock_client.close.assert_called_once()
