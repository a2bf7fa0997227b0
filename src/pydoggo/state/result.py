"""Tri-state fetch outcome exposed to presentation code."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


class FetchStatus(StrEnum):
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class Loading:
    """A fetch is in flight and none has completed since the last refresh."""

    status: ClassVar[FetchStatus] = FetchStatus.LOADING


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """The most recent fetch produced *value*."""

    value: T

    status: ClassVar[FetchStatus] = FetchStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class Failure:
    """The most recent fetch failed; *message* is meant for display."""

    message: str

    status: ClassVar[FetchStatus] = FetchStatus.FAILURE


FetchResult = Union[Loading, Success[T], Failure]
"""Exactly one of :class:`Loading`, :class:`Success` or :class:`Failure`."""

LOADING = Loading()
