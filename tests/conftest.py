# File: tests/conftest.py
from __future__ import annotations

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass
from typing import AsyncIterator, Awaitable, Callable, Dict

import pytest
import pytest_asyncio
from aiohttp import web
from link_scout.config import CrawlConfig


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


# --------------------------------------------------------------------------- #
#                               Fake web site                                 #
# --------------------------------------------------------------------------- #


@dataclass
class Route:
    """Canned response for one path of a FakeSite."""

    body: str = ""
    status: int = 200
    content_type: str = "text/html"
    delay: float = 0.0


def page(*hrefs: str, **kwargs) -> Route:
    """HTML route whose body links to *hrefs* in the given order."""
    links = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return Route(body=f"<html><body>{links}</body></html>", **kwargs)


class FakeSite:
    """aiohttp application serving fixed routes and counting hits per method and path."""

    def __init__(self, routes: Dict[str, Route]) -> None:
        self.routes = routes
        self.hits: Counter = Counter()
        self.in_flight = 0
        self.max_in_flight = 0
        self.base_url = ""

    def url(self, path: str = "/") -> str:
        return f"{self.base_url}{path}"

    def gets(self, path: str) -> int:
        return self.hits[("GET", path)]

    def heads(self, path: str) -> int:
        return self.hits[("HEAD", path)]

    def app(self) -> web.Application:
        app = web.Application()
        for path, route in self.routes.items():
            app.router.add_route("*", path, self._handler(route))
        return app

    def _handler(self, route: Route):
        async def handle(request: web.Request) -> web.Response:
            self.hits[(request.method, request.path)] += 1
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
            try:
                if route.delay:
                    await asyncio.sleep(route.delay)
                return web.Response(
                    text=route.body, status=route.status, content_type=route.content_type
                )
            finally:
                self.in_flight -= 1

        return handle


@pytest_asyncio.fixture
async def serve_site(unused_tcp_port_factory) -> AsyncIterator[Callable[[Dict[str, Route]], Awaitable[FakeSite]]]:
    """Factory starting a FakeSite on a free port; every runner is cleaned up afterwards."""
    runners = []

    async def _serve(routes: Dict[str, Route]) -> FakeSite:
        site = FakeSite(routes)
        runner = web.AppRunner(site.app())
        await runner.setup()
        port = unused_tcp_port_factory()
        await web.TCPSite(runner, "127.0.0.1", port).start()
        runners.append(runner)
        site.base_url = f"http://127.0.0.1:{port}"
        return site

    yield _serve
    for runner in runners:
        await runner.cleanup()


@pytest.fixture()
def closed_url(unused_tcp_port_factory) -> str:
    """URL on a port nobody listens on: requests fail at transport level."""
    return f"http://127.0.0.1:{unused_tcp_port_factory()}/nowhere"


# --------------------------------------------------------------------------- #
#                               Misc helpers                                  #
# --------------------------------------------------------------------------- #


def make_config(root_url: str, **kwargs) -> CrawlConfig:
    return CrawlConfig(root_url=root_url, **kwargs)


@pytest.fixture()
def scout_caplog(caplog, monkeypatch):
    """caplog that also sees the LinkScout logger after the CLI disabled propagation."""
    monkeypatch.setattr(logging.getLogger("LinkScout"), "propagate", True)
    caplog.set_level(logging.DEBUG, logger="LinkScout")
    return caplog
