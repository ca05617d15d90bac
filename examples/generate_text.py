"""Generate text with the completion endpoint.

Run from repo root with ``OPENAI_API_KEY`` set:

    python examples/generate_text.py
"""

from __future__ import annotations

import asyncio

from openai_typed import Client, Config, setup_logging
from openai_typed.api_resources.completion import CompletionParam, create


async def main() -> None:
    async with Client(Config.from_env()) as client:
        param = CompletionParam(
            "gpt-3.5-turbo-instruct",
            prompt="Generate a plot for an absurd interstellar parody.",
            max_tokens=500,
            temperature=0.9,
            top_p=1.0,
            frequency_penalty=0.0,
            presence_penalty=0.0,
        )
        resp = await create(client, param)

    print(f"Generated text: {resp.text}")
    if resp.usage:
        print(f"Tokens used: {resp.usage.total_tokens}")


if __name__ == "__main__":
    setup_logging(level="INFO")
    asyncio.run(main())
