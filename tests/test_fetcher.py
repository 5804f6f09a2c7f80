# File: tests/test_fetcher.py
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import ClientSession, web

from akamai_watch.config import DEFAULT_USER_AGENT
from akamai_watch.tracker.fetcher import Fetcher

SCRIPT_BODY = "(function(){var _cf={};_cf.x=1;})();"


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest_asyncio.fixture
async def script_server(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()

    async def handle_root(_):
        return web.Response(text='<script src="/s.js"></script>', content_type="text/html")

    async def handle_script(_):
        return web.Response(text=SCRIPT_BODY, content_type="application/javascript")

    async def handle_missing(_):
        return web.Response(status=404, text="nope")

    async def handle_created(_):
        return web.Response(status=201, text="created")

    async def handle_slow(_):
        await asyncio.sleep(1)
        return web.Response(text="late")

    app.router.add_get("/", handle_root)
    app.router.add_get("/s.js", handle_script)
    app.router.add_get("/missing", handle_missing)
    app.router.add_get("/created", handle_created)
    app.router.add_get("/slow", handle_slow)

    async for url in _serve_app(app, unused_tcp_port):
        yield url


@pytest.mark.asyncio()
async def test_fetch_page_ok(script_server: str):
    async with ClientSession() as session:
        page = await Fetcher(session).fetch(script_server + "/")
    assert page is not None
    assert page.url == script_server + "/"
    assert 'src="/s.js"' in page.content


@pytest.mark.asyncio()
async def test_fetch_script_text(script_server: str):
    async with ClientSession() as session:
        page = await Fetcher(session, user_agent="TestAgent/1.0").fetch(script_server + "/s.js")
    assert page is not None
    assert page.content == SCRIPT_BODY


@pytest.mark.asyncio()
@pytest.mark.parametrize("path", ["/missing", "/created", "/not-routed"])
async def test_fetch_non_200_is_none(script_server: str, path: str):
    async with ClientSession() as session:
        assert await Fetcher(session).fetch(script_server + path) is None


@pytest.mark.asyncio()
async def test_fetch_timeout_is_none(script_server: str):
    async with ClientSession() as session:
        assert await Fetcher(session, timeout=0.2).fetch(script_server + "/slow") is None


@pytest.mark.asyncio()
async def test_fetch_connection_refused_is_none(unused_tcp_port: int):
    async with ClientSession() as session:
        assert await Fetcher(session).fetch(f"http://localhost:{unused_tcp_port}/") is None


@pytest.mark.asyncio()
async def test_default_user_agent_is_sent(unused_tcp_port: int):
    agents: list[str] = []

    async def handle_root(request):
        agents.append(request.headers.get("User-Agent"))
        return web.Response(text="ok")

    app = web.Application()
    app.router.add_get("/", handle_root)

    async for base in _serve_app(app, unused_tcp_port):
        async with ClientSession() as session:
            await Fetcher(session).fetch(base + "/")

    assert agents == [DEFAULT_USER_AGENT]
