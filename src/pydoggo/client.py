"""High-level async client for the Dog CEO and posts APIs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from pydoggo._transport import HttpTransport
from pydoggo.config import POSTS, RANDOM_DOG_IMAGE, Endpoint
from pydoggo.exceptions import PydoggoClientError
from pydoggo.fetcher import RemoteResourceFetcher, posts_fetcher, random_dog_fetcher
from pydoggo.models.post import Post
from pydoggo.state.result import FetchResult
from pydoggo.state.store import FetchStateStore

_logger = logging.getLogger(__name__)


class DogApiClient:
    """Async client handing out fetchers and state stores.

    Usage::

        async with DogApiClient() as client:
            store = client.random_dog_store()
            store.start()
            await store.wait_idle()
            state = store.current_state()

    Parameters
    ----------
    session : aiohttp.ClientSession or None
        Externally owned HTTP session. When omitted the client creates one
        on enter and closes it on exit.
    dog_endpoint, posts_endpoint : Endpoint
        Override the fixed endpoints (tests point these at a local server).
    """

    def __init__(
        self,
        *,
        session: aiohttp.ClientSession | None = None,
        dog_endpoint: Endpoint = RANDOM_DOG_IMAGE,
        posts_endpoint: Endpoint = POSTS,
    ) -> None:
        self._external_session = session is not None
        self._http_session = session
        self._dog_endpoint = dog_endpoint
        self._posts_endpoint = posts_endpoint
        self._transport: HttpTransport | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> DogApiClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise PydoggoClientError("Client not initialized. Use 'async with DogApiClient() as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Fetchers
    # ------------------------------------------------------------------

    def random_dog_fetcher(self) -> RemoteResourceFetcher[str]:
        return random_dog_fetcher(self._require_transport(), self._dog_endpoint)

    def posts_fetcher(self) -> RemoteResourceFetcher[list[Post]]:
        return posts_fetcher(self._require_transport(), self._posts_endpoint)

    async def get_random_dog_url(self) -> str:
        """Fetch one random dog image URL, raising ``FetchError`` on failure."""
        return await self.random_dog_fetcher().fetch()

    async def get_posts(self) -> list[Post]:
        """Fetch all posts, raising ``FetchError`` on failure."""
        posts = await self.posts_fetcher().fetch()
        _logger.debug("Fetched %d posts", len(posts))
        return posts

    # ------------------------------------------------------------------
    # Stores
    # ------------------------------------------------------------------

    def random_dog_store(
        self,
        *,
        on_change: Callable[[FetchResult[str]], None] | None = None,
    ) -> FetchStateStore[str]:
        """Unstarted store backed by the random dog image endpoint."""
        return FetchStateStore(self.random_dog_fetcher(), on_change=on_change)

    def posts_store(
        self,
        *,
        on_change: Callable[[FetchResult[list[Post]]], None] | None = None,
    ) -> FetchStateStore[list[Post]]:
        """Unstarted store backed by the posts endpoint."""
        return FetchStateStore(self.posts_fetcher(), on_change=on_change)
