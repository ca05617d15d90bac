"""List the models visible to the configured API key.

Run from repo root with ``OPENAI_API_KEY`` set:

    python examples/list_models.py
"""

from __future__ import annotations

import asyncio

from openai_typed import Client, Config, setup_logging
from openai_typed.api_resources.models import list_models


async def main() -> None:
    async with Client(Config.from_env()) as client:
        models = await list_models(client)

    for model in sorted(models.data, key=lambda m: m.id):
        print(f"{model.id:<40} {model.owned_by}")


if __name__ == "__main__":
    setup_logging(level="DEBUG", console_output=True)
    asyncio.run(main())
