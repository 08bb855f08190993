"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test modules.
"""

import pytest

from ai_megarepo.config import Settings


@pytest.fixture
def settings():
    """Settings with both hosted providers configured."""
    return Settings(
        openai_api_key="test-openai-key",
        huggingface_api_key="test-hf-token",
    )


@pytest.fixture
def empty_settings():
    """Settings as built from an empty environment."""
    return Settings.from_env({})


@pytest.fixture
def clean_env(monkeypatch):
    """
    Remove every variable Settings reads from the process environment.

    Usage:
        def test_something(clean_env):
            clean_env.setenv("OPENAI_MODEL", "gpt-4")
    """
    for key in (
        "OPENAI_API_KEY",
        "OPENAI_MODEL",
        "HUGGINGFACE_API_KEY",
        "HUGGINGFACE_MODEL",
        "TF_BACKEND",
        "PORT",
    ):
        # setenv first so undo also removes anything load_dotenv() adds
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
