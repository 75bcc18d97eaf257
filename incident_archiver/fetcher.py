"""
Feed fetcher.

One GET against the configured feed URL using an aiohttp client session.
The run itself is sequential; fetch_feed_sync() drives the coroutine to
completion with asyncio.run().
"""

from __future__ import annotations

import asyncio

import aiohttp

from incident_archiver import __version__
from incident_archiver.errors import FetchError

_HEADERS = {
    "Accept": "application/atom+xml, application/xml;q=0.9, */*;q=0.1",
    "User-Agent": f"incident-archiver/{__version__}",
}


async def fetch_feed(url: str, timeout: float = 30.0) -> bytes:
    """
    Fetch the raw feed body.

    A non-2xx status is treated as a transport failure rather than passed
    on to the parser.

    Raises:
        FetchError: On connection errors, timeouts, non-2xx status or a
            failure while reading the body.
    """
    try:
        async with aiohttp.ClientSession(
            headers=_HEADERS,
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as session:
            async with session.get(url) as resp:
                resp.raise_for_status()
                return await resp.read()
    except aiohttp.ClientResponseError as exc:
        raise FetchError(f"{url}: HTTP {exc.status} {exc.message}") from exc
    except aiohttp.ClientError as exc:
        raise FetchError(f"{url}: {exc}") from exc
    except asyncio.TimeoutError as exc:
        raise FetchError(f"{url}: timed out after {timeout:g}s") from exc


def fetch_feed_sync(url: str, timeout: float = 30.0) -> bytes:
    """Blocking wrapper around fetch_feed()."""
    return asyncio.run(fetch_feed(url, timeout))
