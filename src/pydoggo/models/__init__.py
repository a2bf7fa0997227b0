"""Data models for remote API responses."""

from pydoggo.models._base import ApiModel
from pydoggo.models.dog import DogImage
from pydoggo.models.post import POST_LIST_ADAPTER, Post

__all__ = [
    "ApiModel",
    "DogImage",
    "POST_LIST_ADAPTER",
    "Post",
]
