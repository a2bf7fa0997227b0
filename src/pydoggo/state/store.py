"""In-memory holder of the latest fetch outcome.

The store is the only writer of its state cell. Presentation code reads
:meth:`FetchStateStore.current_state` on every render and calls
:meth:`FetchStateStore.refresh` on user action.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from pydoggo.exceptions import FetchError, FetchHttpStatusError
from pydoggo.state.result import LOADING, Failure, FetchResult, Success

_logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Fetcher(Protocol[T_co]):
    """Anything with an awaitable ``fetch()``; see `RemoteResourceFetcher`."""

    async def fetch(self) -> T_co:
        ...


def failure_message(exc: BaseException) -> str:
    """Human-readable text stored in :class:`Failure`."""
    if isinstance(exc, FetchHttpStatusError):
        return f"Error: {exc.status_code} {exc.reason}".rstrip()
    return f"Exception: {exc}"


class FetchStateStore(Generic[T]):
    """Holds one :data:`FetchResult` cell, starting in :class:`Loading`.

    Construction has no side effects; call :meth:`start` once the owning
    context is ready to issue the first fetch.

    Repeated :meth:`refresh` calls are neither deduplicated nor cancelled.
    Every fetch runs to completion and writes its outcome, so under
    overlapping refreshes the visible state is whichever fetch finished
    last.

    Parameters
    ----------
    fetcher : Fetcher
        Source of the resource.
    on_change : callable or None
        Called with every new state, including ``Loading``. Exceptions from
        the callback are logged and swallowed.
    """

    def __init__(
        self,
        fetcher: Fetcher[T],
        *,
        on_change: Callable[[FetchResult[T]], None] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._on_change = on_change
        self._state: FetchResult[T] = LOADING
        self._started = False
        # Strong refs so running fetches are not garbage-collected.
        self._pending: set[asyncio.Task[None]] = set()

    def current_state(self) -> FetchResult[T]:
        """Snapshot of the current state."""
        return self._state

    @property
    def started(self) -> bool:
        return self._started

    @property
    def in_flight(self) -> int:
        """Number of fetches that have not completed yet."""
        return len(self._pending)

    def start(self) -> asyncio.Task[None] | None:
        """Issue the initial fetch.

        Returns the fetch task, or ``None`` if the store was already started.
        Must be called from within a running event loop.
        """
        if self._started:
            _logger.debug("Store already started; ignoring start()")
            return None
        self._started = True
        return self.refresh()

    def refresh(self) -> asyncio.Task[None]:
        """Switch to ``Loading`` now and fetch again in the background.

        The returned task never raises a fetch error; failures end up as
        :class:`Failure` in the store. Awaiting the task is optional.
        """
        loop = asyncio.get_running_loop()
        self._started = True
        self._set_state(LOADING)
        task = loop.create_task(self._run_fetch())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait until no fetch is in flight.

        Fetches cancelled from outside the store count as finished.
        """
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def _run_fetch(self) -> None:
        state: FetchResult[T]
        try:
            value = await self._fetcher.fetch()
        except FetchError as exc:
            _logger.warning("Fetch failed: %s", exc)
            state = Failure(failure_message(exc))
        except Exception as exc:
            _logger.exception("Unexpected error while fetching")
            state = Failure(failure_message(exc))
        else:
            state = Success(value)
        self._set_state(state)

    def _set_state(self, state: FetchResult[T]) -> None:
        self._state = state
        if self._on_change is None:
            return
        try:
            self._on_change(state)
        except Exception:
            _logger.exception("on_change callback failed")
