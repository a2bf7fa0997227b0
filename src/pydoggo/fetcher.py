"""Single-shot fetchers for fixed remote endpoints."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from pydoggo._transport import Transport
from pydoggo.config import POSTS, RANDOM_DOG_IMAGE, Endpoint
from pydoggo.exceptions import FetchDecodeError
from pydoggo.models.dog import DogImage
from pydoggo.models.post import POST_LIST_ADAPTER, Post

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class RemoteResourceFetcher(Generic[T]):
    """Fetch one typed resource from a fixed endpoint.

    Each :meth:`fetch` call issues exactly one request; calls share no state
    and are never retried.

    Parameters
    ----------
    transport : Transport
        Object performing the HTTP exchange.
    endpoint : Endpoint
        Base URL, path and verb, fixed for the lifetime of the fetcher.
    decode : callable
        Turns the JSON body into the resource. ``pydantic.ValidationError``,
        ``ValueError`` and ``TypeError`` raised here become
        :class:`~pydoggo.exceptions.FetchDecodeError`.
    """

    def __init__(
        self,
        transport: Transport,
        endpoint: Endpoint,
        decode: Callable[[Any], T],
    ) -> None:
        self._transport = transport
        self._endpoint = endpoint
        self._decode = decode

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    async def fetch(self) -> T:
        """Request the resource and decode it.

        Raises
        ------
        FetchError
            One of its subclasses for transport, HTTP status or decode failures.
        """
        url = self._endpoint.url
        body = await self._transport.request_json(self._endpoint.method, url)
        try:
            resource = self._decode(body)
        except (ValidationError, ValueError, TypeError) as exc:
            raise FetchDecodeError(
                f"Could not decode response from {url}: {exc}",
                endpoint=url,
            ) from exc
        _logger.debug("Decoded %s from %s", type(resource).__name__, url)
        return resource


def decode_dog_image_url(body: Any) -> str:
    """Validate a random image body and return its image URL."""
    return DogImage.model_validate(body).url


def random_dog_fetcher(transport: Transport, endpoint: Endpoint = RANDOM_DOG_IMAGE) -> RemoteResourceFetcher[str]:
    """Fetcher for ``GET /breeds/image/random`` yielding the image URL."""
    return RemoteResourceFetcher(transport, endpoint, decode_dog_image_url)


def posts_fetcher(transport: Transport, endpoint: Endpoint = POSTS) -> RemoteResourceFetcher[list[Post]]:
    """Fetcher for ``GET /posts``."""
    return RemoteResourceFetcher(transport, endpoint, POST_LIST_ADAPTER.validate_python)
