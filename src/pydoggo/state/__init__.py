"""State layer.

Turns fetch outcomes into an explicit ``Loading | Success | Failure`` value
that presentation code can render without juggling separate flags.
"""

from pydoggo.state.result import LOADING, Failure, FetchResult, FetchStatus, Loading, Success
from pydoggo.state.store import Fetcher, FetchStateStore, failure_message

__all__ = [
    "LOADING",
    "Failure",
    "FetchResult",
    "FetchStateStore",
    "FetchStatus",
    "Fetcher",
    "Loading",
    "Success",
    "failure_message",
]
