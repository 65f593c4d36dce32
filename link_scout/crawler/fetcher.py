# link_scout/crawler/fetcher.py
"""
Fetcher module: one GET per call over a shared aiohttp session, with a
per-request timeout. No retries and no rate limiting here; throttling is the
orchestrator's job.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from link_scout.config import CrawlerConfig
from link_scout.crawler.models import FetchResponse
from link_scout.errors import FetchError

__all__ = ("Fetcher",)


class Fetcher:
    """Async context manager owning the HTTP session used for a crawl run."""

    def __init__(self, config: CrawlerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> FetchResponse:
        """
        GET *url* and return its status, headers and body.

        Any non-2xx status is returned as is; only transport failures raise
        :class:`FetchError`. Redirects are followed by aiohttp.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                body = await resp.read()
                return FetchResponse(
                    url=str(resp.url),
                    status=resp.status,
                    headers=dict(resp.headers),
                    body=body,
                )
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"timed out after {self.config.timeout}s") from exc
        except (ClientError, ValueError) as exc:
            raise FetchError(url, exc) from exc
