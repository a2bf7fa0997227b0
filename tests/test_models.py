"""Tests for Pydantic response model parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pydoggo.models.dog import DogImage
from pydoggo.models.post import POST_LIST_ADAPTER, Post


class TestDogImage:
    def test_parses_api_payload(self) -> None:
        image = DogImage.model_validate(
            {"message": "https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg", "status": "success"}
        )
        assert image.url == "https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg"
        assert image.status == "success"

    def test_extra_fields_are_ignored_but_kept_in_raw(self) -> None:
        payload = {"message": "https://img/1.png", "status": "success", "code": 200}
        image = DogImage.model_validate(payload)
        assert image.message == "https://img/1.png"
        assert image.raw == payload
        assert not hasattr(image, "code")

    @pytest.mark.parametrize(
        "payload",
        [
            {"status": "success"},
            {"message": "https://img/1.png"},
            {"message": 42, "status": "success"},
            ["https://img/1.png"],
        ],
    )
    def test_incomplete_payload_is_rejected(self, payload: object) -> None:
        with pytest.raises(ValidationError):
            DogImage.model_validate(payload)

    def test_model_is_frozen(self) -> None:
        image = DogImage(message="https://img/1.png", status="success")
        with pytest.raises(ValidationError):
            image.message = "other"  # type: ignore[misc]


class TestPost:
    def test_camel_case_keys_map_to_snake_case(self) -> None:
        post = Post.model_validate({"userId": 1, "id": 7, "title": "t", "body": "b"})
        assert post.user_id == 1
        assert post.id == 7
        assert post.raw["userId"] == 1

    def test_snake_case_construction(self) -> None:
        post = Post(user_id=2, id=3, title="hello", body="world")
        assert post.user_id == 2

    def test_list_adapter(self) -> None:
        posts = POST_LIST_ADAPTER.validate_python(
            [
                {"userId": 1, "id": 1, "title": "a", "body": "x"},
                {"userId": 1, "id": 2, "title": "b", "body": "y"},
            ]
        )
        assert [p.id for p in posts] == [1, 2]

    def test_list_adapter_rejects_object(self) -> None:
        with pytest.raises(ValidationError):
            POST_LIST_ADAPTER.validate_python({"userId": 1, "id": 1, "title": "a", "body": "x"})


class TestRawPayload:
    def test_payload_raw_key_does_not_clobber_raw_field(self) -> None:
        payload = {"message": "https://img/1.png", "status": "success", "raw": "x"}
        image = DogImage.model_validate(payload)
        assert image.url == "https://img/1.png"
        assert image.raw == payload

    def test_payload_raw_dict_is_kept_as_plain_field_value(self) -> None:
        payload = {"message": "https://img/1.png", "status": "success", "raw": {"other": 1}}
        image = DogImage.model_validate(payload)
        assert image.raw == payload
        assert image.raw["raw"] == {"other": 1}
