"""
Tests for the feed fetcher, against a local aiohttp server.
"""

import asyncio

import pytest
from aiohttp import web
from aiohttp import test_utils

from incident_archiver.errors import FetchError
from incident_archiver.fetcher import fetch_feed

from conftest import make_feed


def _app(status=200, body=b"", delay=0.0):
    seen_headers = {}

    async def handler(request):
        seen_headers["accept"] = request.headers.get("Accept", "")
        seen_headers["user-agent"] = request.headers.get("User-Agent", "")
        if delay:
            await asyncio.sleep(delay)
        return web.Response(status=status, body=body, content_type="application/atom+xml")

    app = web.Application()
    app.router.add_get("/feed.atom", handler)
    return app, seen_headers


def _fetch(app, timeout=5.0):
    async def go():
        async with test_utils.TestServer(app) as server:
            return await fetch_feed(str(server.make_url("/feed.atom")), timeout=timeout)

    return asyncio.run(go())


class TestFetchFeed:
    def test_returns_raw_bytes(self):
        body = make_feed("a", "b")
        app, _ = _app(body=body)
        assert _fetch(app) == body

    def test_sends_accept_header(self):
        app, seen = _app(body=make_feed())
        _fetch(app)
        assert "application/atom+xml" in seen["accept"]
        assert seen["user-agent"].startswith("incident-archiver/")

    def test_non_2xx_is_fetch_error(self):
        app, _ = _app(status=502, body=b"<html>Bad gateway</html>")
        with pytest.raises(FetchError) as excinfo:
            _fetch(app)
        assert "502" in str(excinfo.value)

    def test_not_found(self):
        app, _ = _app(status=404)
        with pytest.raises(FetchError):
            _fetch(app)

    def test_timeout(self):
        app, _ = _app(body=make_feed(), delay=2.0)
        with pytest.raises(FetchError):
            _fetch(app, timeout=0.2)

    def test_connection_refused(self):
        with pytest.raises(FetchError):
            asyncio.run(fetch_feed("http://127.0.0.1:1/feed.atom", timeout=5.0))
