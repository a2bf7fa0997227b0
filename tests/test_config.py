from __future__ import annotations

import pytest

from pydoggo.config import POSTS, RANDOM_DOG_IMAGE, Endpoint


def test_default_endpoints() -> None:
    assert RANDOM_DOG_IMAGE.url == "https://dog.ceo/api/breeds/image/random"
    assert RANDOM_DOG_IMAGE.method == "GET"
    assert POSTS.url == "https://jsonplaceholder.typicode.com/posts"


def test_url_joins_slashes() -> None:
    assert Endpoint("http://host/api/", "/x").url == "http://host/api/x"
    assert Endpoint("http://host/api", "x").url == "http://host/api/x"


def test_method_is_normalised() -> None:
    assert Endpoint("http://host", "/x", method="get").method == "GET"


def test_empty_base_url_rejected() -> None:
    with pytest.raises(ValueError):
        Endpoint("", "/x")
