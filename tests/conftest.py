# File: tests/conftest.py
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Dict, List, Tuple

import pytest
from aiohttp import web

from link_scout.config import CrawlerConfig
from link_scout.crawler.models import FetchResponse
from link_scout.errors import FetchError
from link_scout.logger import configure


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


class FakeFetcher:
    """
    In-memory site: maps URL -> (status, html).
    Unknown URLs raise FetchError, like a refused connection.
    Records every fetched URL and its start time.
    """

    def __init__(self, pages: Dict[str, Tuple[int, str]], delay: float = 0.0) -> None:
        self.pages = pages
        self.delay = delay
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchResponse:
        self.calls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        if url not in self.pages:
            raise FetchError(url, "connection refused")
        status, html = self.pages[url]
        return FetchResponse(url=url, status=status, body=html.encode("utf-8"))


def html_page(title: str, *hrefs: str) -> str:
    links = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html><head><title>{title}</title></head><body>{links}</body></html>"


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """
    Return a basic valid CrawlerConfig for crawler tests.
    """
    return CrawlerConfig(
        base_url="http://example.com/",
        max_depth=2,
        requests_per_second=1000.0,
        timeout=2.0,
        user_agent="TestAgent/1.0",
    )


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture(autouse=True)
def reset_logger():
    """CliRunner swaps stdout; restore the project logger after every test."""
    yield
    configure()
