"""HTTP transport for plain JSON endpoints."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from pydoggo._constants import USER_AGENT
from pydoggo._logsafe import summarize_for_log
from pydoggo.exceptions import FetchDecodeError, FetchHttpStatusError, FetchTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by fetchers.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def request_json(self, method: str, url: str) -> Any:
        ...


class HttpTransport:
    """aiohttp-backed transport returning decoded JSON bodies.

    The transport never retries and applies no timeout of its own; whatever
    timeout the supplied ``aiohttp.ClientSession`` carries is the only one.
    """

    def __init__(self, http_session: aiohttp.ClientSession) -> None:
        self._http = http_session

    async def request_json(self, method: str, url: str) -> Any:
        """Send one request and return the JSON-decoded body.

        Raises
        ------
        FetchTransportError
            The request never produced a response.
        FetchHttpStatusError
            The response status is outside ``2xx``.
        FetchDecodeError
            The body is not valid JSON.
        """
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }

        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, headers=headers) as resp:
                status = resp.status
                reason = resp.reason or ""
                raw_body = await resp.read()
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise FetchTransportError(
                f"Request to {url} failed: {str(exc) or type(exc).__name__}",
                endpoint=url,
            ) from exc

        if not 200 <= status < 300:
            snippet = raw_body[:200].decode("utf-8", errors="replace").strip()
            message = f"HTTP {status} {reason} from {url}".replace("  ", " ")
            if snippet:
                message = f"{message}: {snippet}"
            raise FetchHttpStatusError(
                message,
                status_code=status,
                reason=reason,
                endpoint=url,
            )

        try:
            body = json.loads(raw_body)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            snippet = raw_body[:200].decode("utf-8", errors="replace")
            raise FetchDecodeError(
                f"Could not decode response from {url}: invalid JSON: {snippet}",
                endpoint=url,
            ) from exc

        _logger.debug("%s %s -> %d %s", method, url, status, summarize_for_log(body))
        return body
