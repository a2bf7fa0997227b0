"""pydoggo - Async fetch-and-display state for the Dog CEO random image API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pydoggo")
except PackageNotFoundError:
    __version__ = "0+local"
from pydoggo.client import DogApiClient
from pydoggo.config import Endpoint
from pydoggo.exceptions import (
    FetchDecodeError,
    FetchError,
    FetchHttpStatusError,
    FetchTransportError,
    PydoggoClientError,
    PydoggoError,
)
from pydoggo.fetcher import RemoteResourceFetcher, posts_fetcher, random_dog_fetcher
from pydoggo.models import DogImage, Post
from pydoggo.state import Failure, FetchResult, FetchStateStore, FetchStatus, Loading, Success

__all__ = [
    "__version__",
    "DogApiClient",
    "DogImage",
    "Endpoint",
    "Failure",
    "FetchDecodeError",
    "FetchError",
    "FetchHttpStatusError",
    "FetchResult",
    "FetchStateStore",
    "FetchStatus",
    "FetchTransportError",
    "Loading",
    "Post",
    "PydoggoClientError",
    "PydoggoError",
    "RemoteResourceFetcher",
    "Success",
    "posts_fetcher",
    "random_dog_fetcher",
]
