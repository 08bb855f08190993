"""
Configuration management for AI Megarepo.

Loads settings from environment variables (typically from a .env file).
Uses python-dotenv to load .env before the environment is read.

Usage:
    from ai_megarepo.config import load_settings

    settings = load_settings()
    provider = OpenAIProvider(settings)

Settings are built once at process start and passed explicitly into each
provider; nothing inside the providers reads the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_OPENAI_MODEL = "gpt-3.5-turbo"
DEFAULT_HUGGINGFACE_MODEL = "microsoft/DialoGPT-medium"
DEFAULT_TENSORFLOW_BACKEND = "cpu"
DEFAULT_SERVER_PORT = 3000

# Look for .env in project root (parent of src/)
ENV_PATH = Path(__file__).parent.parent.parent / ".env"


@dataclass(frozen=True)
class Settings:
    """
    Immutable application settings.

    Attributes:
        openai_api_key: OpenAI API key (empty when not configured)
        openai_model: Default chat model for the OpenAI provider
        huggingface_api_key: Hugging Face token (may be empty)
        huggingface_model: Default text-generation model on the hub
        tensorflow_backend: Execution backend for local models ('cpu', 'gpu')
        server_port: Port reserved for a server; nothing listens on it
    """
    openai_api_key: str = ""
    openai_model: str = DEFAULT_OPENAI_MODEL
    huggingface_api_key: str = ""
    huggingface_model: str = DEFAULT_HUGGINGFACE_MODEL
    tensorflow_backend: str = DEFAULT_TENSORFLOW_BACKEND
    server_port: int = DEFAULT_SERVER_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from an environment mapping.

        Empty values fall back to the defaults, matching how unset
        variables are treated.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If PORT is not an integer
        """
        env = os.environ if environ is None else environ

        raw_port = env.get("PORT") or str(DEFAULT_SERVER_PORT)
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigurationError(
                f"PORT must be an integer, got {raw_port!r}"
            ) from e

        return cls(
            openai_api_key=env.get("OPENAI_API_KEY", ""),
            openai_model=env.get("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
            huggingface_api_key=env.get("HUGGINGFACE_API_KEY", ""),
            huggingface_model=env.get("HUGGINGFACE_MODEL") or DEFAULT_HUGGINGFACE_MODEL,
            tensorflow_backend=env.get("TF_BACKEND") or DEFAULT_TENSORFLOW_BACKEND,
            server_port=port,
        )

    def get_available_providers(self) -> list[str]:
        """
        Get list of hosted providers that have API keys configured.

        Returns:
            List of provider names with credentials set
        """
        available = []
        if self.openai_api_key:
            available.append("openai")
        if self.huggingface_api_key:
            available.append("huggingface")
        return available


def load_settings(env_path: Optional[Path] = None) -> Settings:
    """
    Load .env (if present) into the process environment and build Settings.

    Variables already set in the environment take precedence over .env.

    Args:
        env_path: Path to a .env file. Defaults to the project root .env.

    Returns:
        Settings instance
    """
    path = env_path or ENV_PATH
    if path.exists():
        load_dotenv(path)
    return Settings.from_env()


def get_provider_instructions(provider_name: str) -> str:
    """Get environment variable instructions for a provider."""
    instructions = {
        "openai": """
  OPENAI_API_KEY=your-api-key
  OPENAI_MODEL=gpt-3.5-turbo
        """,
        "huggingface": """
  HUGGINGFACE_API_KEY=your-token
  HUGGINGFACE_MODEL=microsoft/DialoGPT-medium
        """,
    }
    return instructions.get(provider_name, "  (Unknown provider)")
