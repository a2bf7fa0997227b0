"""Endpoint configuration for pydoggo."""

from __future__ import annotations

import dataclasses

from pydoggo._constants import (
    DOG_API_BASE_URL,
    POSTS_API_BASE_URL,
    POSTS_PATH,
    RANDOM_DOG_IMAGE_PATH,
)


@dataclasses.dataclass(frozen=True)
class Endpoint:
    """A fixed remote endpoint.

    Parameters
    ----------
    base_url : str
        Scheme and host, optionally with a path prefix
        (e.g. ``"https://dog.ceo/api"``). A trailing slash is ignored.
    path : str
        Resource path appended to *base_url* (e.g. ``"/breeds/image/random"``).
    method : str
        HTTP verb. Defaults to ``"GET"``.
    """

    base_url: str
    path: str
    method: str = "GET"

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must be non-empty")
        object.__setattr__(self, "method", self.method.upper())

    @property
    def url(self) -> str:
        """Absolute URL of the endpoint."""
        path = self.path if self.path.startswith("/") else f"/{self.path}"
        return f"{self.base_url.rstrip('/')}{path}"


RANDOM_DOG_IMAGE = Endpoint(DOG_API_BASE_URL, RANDOM_DOG_IMAGE_PATH)
POSTS = Endpoint(POSTS_API_BASE_URL, POSTS_PATH)
