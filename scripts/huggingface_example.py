"""
Example: zero-shot classification and embeddings with Hugging Face.

Optional env vars:
- HUGGINGFACE_API_KEY (public models work without it, subject to rate limits)
"""

import asyncio

from ai_megarepo import HuggingFaceProvider, load_settings
from ai_megarepo.errors import AIMegarepoError


async def huggingface_example() -> None:
    print("Running Hugging Face example")
    settings = load_settings()

    try:
        async with HuggingFaceProvider(settings) as hf:
            text = "I love using AI tools for development!"
            labels = ["positive", "negative", "neutral"]
            print(f"Text to classify: {text}")
            print(f"Available labels: {labels}")

            classification = await hf.classify_text(text, labels)
            print("Classification results:")
            for result in classification:
                print(f"  {result.label}: {result.score:.4f}")

            embedding_text = "Natural language processing with transformers"
            embedding = await hf.get_embedding(embedding_text)
            print(f"Embedding text: {embedding_text}")
            print(f"Embedding vector length: {len(embedding)}")
            print(f"First 5 embedding values: {embedding[:5]}")
    except AIMegarepoError as exc:
        print(f"Hugging Face example failed: {exc}")


if __name__ == "__main__":
    asyncio.run(huggingface_example())
