"""
Status entry point for AI Megarepo.

Reports which hosted providers are configured and brings up the local
TensorFlow backend. Installed as the ``ai-megarepo`` console script.
"""

import asyncio
import os
from typing import Optional

from .config import Settings, get_provider_instructions, load_settings
from .errors import ConfigurationError
from .local_models import LinearRegressionHelper
from .providers import ProviderFactory
from .utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

PROVIDER_LABELS = {
    "openai": "OpenAI",
    "huggingface": "Hugging Face",
}


async def report_status(settings: Settings) -> dict[str, bool]:
    """
    Construct each hosted provider whose credentials are set, then close it.

    Returns:
        Mapping of provider name to whether it is ready
    """
    factory = ProviderFactory(settings)
    configured = set(factory.get_configured_providers())
    status = {}

    for name in factory.get_available_providers():
        label = PROVIDER_LABELS.get(name, name)
        if name not in configured:
            print(f"[WARN] {label} API key not configured")
            print(get_provider_instructions(name))
            status[name] = False
            continue
        try:
            provider = factory.create(name)
        except ConfigurationError as e:
            print(f"[WARN] {label} not ready: {e}")
            status[name] = False
        else:
            await provider.close()
            print(f"[OK] {label} client ready")
            status[name] = True

    return status


def main(settings: Optional[Settings] = None) -> int:
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    settings = settings or load_settings()

    print("AI Megarepo initialized")
    print("Available AI services:")
    asyncio.run(report_status(settings))

    helper = LinearRegressionHelper(settings)
    helper.initialize()
    print(f"[OK] TensorFlow ready (backend={settings.tensorflow_backend})")

    print("\nAll AI systems operational!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
