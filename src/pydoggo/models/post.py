"""Post record model."""

from __future__ import annotations

from pydantic import TypeAdapter

from pydoggo.models._base import ApiModel


class Post(ApiModel):
    """A single post from ``GET /posts``."""

    user_id: int
    id: int
    title: str
    body: str


POST_LIST_ADAPTER: TypeAdapter[list[Post]] = TypeAdapter(list[Post])
