"""Classify a piece of text with the moderation endpoint.

Prerequisites:
- ``OPENAI_API_KEY`` is set (``OPENAI_ORGANIZATION`` and ``OPENAI_BASE_URL``
  are honoured too).
- The package is installed, for example with ``pip install -e .``

Run from repo root:

    python examples/moderate_text.py "I want to kill them."
"""

from __future__ import annotations

import asyncio
import sys

from openai_typed import Client, Config, setup_logging
from openai_typed.api_resources.moderation import ModerationParam, create


async def main(text: str) -> None:
    async with Client(Config.from_env()) as client:
        param = ModerationParam(text, model="text-moderation-stable")
        resp = await create(client, param)

    print(f"id={resp.id} model={resp.model} flagged={resp.flagged}")
    for result in resp.results:
        category, score = result.category_scores.highest()
        print(f"violated: {', '.join(result.categories.violated()) or 'none'}")
        print(f"highest score: {category}={score:.4f}")


if __name__ == "__main__":
    setup_logging(level="INFO")
    asyncio.run(main(" ".join(sys.argv[1:]) or "I want to kill them."))
