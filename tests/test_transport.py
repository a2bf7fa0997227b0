from __future__ import annotations

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from pydoggo._transport import HttpTransport
from pydoggo.exceptions import FetchDecodeError, FetchHttpStatusError, FetchTransportError


def _app() -> web.Application:
    async def ok(_request: web.Request) -> web.Response:
        return web.json_response({"message": "https://img/1.png", "status": "success"})

    async def missing(_request: web.Request) -> web.Response:
        return web.json_response({"message": "Breed not found", "status": "error", "code": 404}, status=404)

    async def broken(_request: web.Request) -> web.Response:
        return web.Response(text="<html>oops</html>", content_type="text/html")

    async def echo_headers(request: web.Request) -> web.Response:
        return web.json_response({"accept": request.headers.get("Accept"), "method": request.method})

    app = web.Application()
    app.router.add_get("/ok", ok)
    app.router.add_get("/missing", missing)
    app.router.add_get("/broken", broken)
    app.router.add_route("*", "/echo", echo_headers)
    return app


@pytest.mark.asyncio
async def test_request_json_returns_decoded_body() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = HttpTransport(session)
        body = await transport.request_json("GET", str(server.make_url("/ok")))

    assert body == {"message": "https://img/1.png", "status": "success"}


@pytest.mark.asyncio
async def test_request_json_uses_method_and_accept_header() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = HttpTransport(session)
        body = await transport.request_json("POST", str(server.make_url("/echo")))

    assert body == {"accept": "application/json", "method": "POST"}


@pytest.mark.asyncio
async def test_non_2xx_raises_http_status_error() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = HttpTransport(session)
        url = str(server.make_url("/missing"))
        with pytest.raises(FetchHttpStatusError) as exc_info:
            await transport.request_json("GET", url)

    exc = exc_info.value
    assert exc.status_code == 404
    assert exc.reason == "Not Found"
    assert exc.endpoint == url
    assert "HTTP 404" in str(exc)
    assert "Breed not found" in str(exc)


@pytest.mark.asyncio
async def test_invalid_json_raises_decode_error() -> None:
    async with TestServer(_app()) as server, aiohttp.ClientSession() as session:
        transport = HttpTransport(session)
        with pytest.raises(FetchDecodeError, match="Could not decode response from .*: invalid JSON"):
            await transport.request_json("GET", str(server.make_url("/broken")))


@pytest.mark.asyncio
async def test_connection_refused_raises_transport_error() -> None:
    server = TestServer(_app())
    await server.start_server()
    url = str(server.make_url("/ok"))
    await server.close()

    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(session)
        with pytest.raises(FetchTransportError) as exc_info:
            await transport.request_json("GET", url)

    assert isinstance(exc_info.value.__cause__, aiohttp.ClientError)
