"""
Example: text generation and embeddings with OpenAI.

Required env vars:
- OPENAI_API_KEY

Optional env vars:
- OPENAI_MODEL (default: gpt-3.5-turbo)
"""

import asyncio

from ai_megarepo import GenerationOptions, OpenAIProvider, load_settings
from ai_megarepo.errors import AIMegarepoError


async def openai_example() -> None:
    print("Running OpenAI example")
    settings = load_settings()

    try:
        async with OpenAIProvider(settings) as openai:
            prompt = "Explain artificial intelligence in simple terms:"
            print(f"Prompt: {prompt}")

            response = await openai.generate_text(
                prompt,
                GenerationOptions(max_tokens=150, temperature=0.7),
            )
            print(f"Response: {response}")

            text = "Machine learning is a subset of artificial intelligence."
            embedding = await openai.generate_embedding(text)
            print(f"Embedding vector length: {len(embedding)}")
            print(f"First 5 embedding values: {embedding[:5]}")
    except AIMegarepoError as exc:
        print(f"OpenAI example failed: {exc}")


if __name__ == "__main__":
    asyncio.run(openai_example())
