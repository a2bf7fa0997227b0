"""Base model for remote API responses.

Every response model inherits from :class:`ApiModel` which provides:

* ``alias_generator=to_camel`` so camelCase API keys (``userId``) map
  automatically to snake_case fields.
* ``extra="ignore"`` so unknown fields the API adds later never break
  decoding. Missing required fields still fail validation.
* A ``raw`` dict that captures the original payload.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for immutable API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        # Always the incoming payload, even when it carries its own "raw" key.
        return {**values, "raw": dict(values)}
