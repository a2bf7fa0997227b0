#!/usr/bin/env python3
"""Terminal "Random Doggo" screen.

Renders the random dog image store after every state change and fetches
another dog each time Enter is pressed.

Usage
-----
::

    python scripts/dog_screen.py
    python scripts/dog_screen.py --posts     # show the posts store once

Options::

    --posts          Render the posts list instead of the dog screen
    --verbose, -v    Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pydoggo import DogApiClient, Failure, FetchResult, Loading, Success  # noqa: E402


def _render_dog(state: FetchResult[Any]) -> str:
    if isinstance(state, Loading):
        body = "  ... fetching a good dog ..."
    elif isinstance(state, Success):
        body = f"  {state.value}"
    elif isinstance(state, Failure):
        body = f"  (no dog) {state.message}"
    else:  # pragma: no cover
        raise TypeError(f"Unknown state {state!r}")
    return f"Random Doggo!\n{body}\n[Enter] show me another doggo, [q] quit"


def _render_posts(state: FetchResult[Any]) -> str:
    if isinstance(state, Loading):
        return "Loading posts..."
    if isinstance(state, Failure):
        return state.message
    lines = [f"{len(state.value)} posts"]
    lines.extend(f"  #{post.id} [{post.user_id}] {post.title}" for post in state.value)
    return "\n".join(lines)


async def _dog_screen(client: DogApiClient) -> None:
    loop = asyncio.get_running_loop()
    store = client.random_dog_store(on_change=lambda state: print(_render_dog(state), flush=True))
    store.start()
    while True:
        answer = await loop.run_in_executor(None, sys.stdin.readline)
        if not answer or answer.strip().lower() == "q":
            break
        store.refresh()
    await store.wait_idle()


async def _posts_screen(client: DogApiClient) -> None:
    store = client.posts_store()
    store.start()
    print(_render_posts(store.current_state()))
    await store.wait_idle()
    print(_render_posts(store.current_state()))


async def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch and show random dog images.")
    parser.add_argument("--posts", action="store_true", help="Render the posts list instead")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    async with DogApiClient() as client:
        if args.posts:
            await _posts_screen(client)
        else:
            await _dog_screen(client)


if __name__ == "__main__":
    asyncio.run(main())
