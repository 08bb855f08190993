"""Locally trained numerical models."""

from .regression import LinearRegressionHelper, resolve_model_path

__all__ = [
    "LinearRegressionHelper",
    "resolve_model_path",
]
