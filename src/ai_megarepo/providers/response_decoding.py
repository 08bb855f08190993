"""
Decoders for Hugging Face inference responses.

The hub returns differently shaped payloads depending on the model and
pipeline. Rather than probing the response at each call site, each payload
is decoded into one of a closed set of variants, and the variant decides
what the caller gets back.

Feature extraction:
    FlatEmbedding        -> ``[0.1, 0.2, 0.3]``, returned as-is
    NestedEmbedding      -> ``[[0.1, 0.2], [0.3, 0.4]]``, first row only
    UnrecognizedEmbedding -> anything else, returned as ``[]``

Only the first row of a nested result is kept. Token-level models return
one row per token, and the rest are dropped.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any, List, Union

from .base import ClassificationResult, EmbeddingVector, LabelScore


@dataclass(frozen=True)
class FlatEmbedding:
    values: EmbeddingVector

    def to_vector(self) -> EmbeddingVector:
        return list(self.values)


@dataclass(frozen=True)
class NestedEmbedding:
    first: EmbeddingVector

    def to_vector(self) -> EmbeddingVector:
        return list(self.first)


@dataclass(frozen=True)
class UnrecognizedEmbedding:
    raw: Any

    def to_vector(self) -> EmbeddingVector:
        return []


DecodedEmbedding = Union[FlatEmbedding, NestedEmbedding, UnrecognizedEmbedding]


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _as_python(value: Any) -> Any:
    # numpy arrays and tensors
    if hasattr(value, "tolist"):
        return value.tolist()
    return value


def decode_feature_extraction(response: Any) -> DecodedEmbedding:
    """Classify a feature-extraction payload by the type of its first element."""
    data = _as_python(response)
    if not _is_sequence(data) or len(data) == 0:
        return UnrecognizedEmbedding(response)

    first = data[0]
    if _is_number(first):
        return FlatEmbedding(list(data))
    if _is_sequence(first):
        return NestedEmbedding(first=list(first))
    return UnrecognizedEmbedding(response)


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def decode_zero_shot_classification(response: Any) -> ClassificationResult:
    """
    Turn a zero-shot classification payload into label/score pairs.

    Accepts either parallel ``labels`` / ``scores`` fields (zipped by
    position, in the response's order) or a list of elements that each
    carry ``label`` and ``score``. Any other shape yields ``[]``.
    """
    labels = _field(response, "labels")
    scores = _field(response, "scores")
    if labels is not None and scores is not None:
        return [
            LabelScore(label=label, score=float(score))
            for label, score in zip(labels, scores)
        ]

    if _is_sequence(response):
        results = []
        for element in response:
            label = _field(element, "label")
            score = _field(element, "score")
            if label is None or score is None:
                return []
            results.append(LabelScore(label=label, score=float(score)))
        return results

    return []
