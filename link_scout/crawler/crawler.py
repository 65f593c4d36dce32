# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol, Union

from link_scout.aggregator import ResultAggregator
from link_scout.crawler.link_extractor import parse_page, resolve_url
from link_scout.crawler.models import FetchResponse, ParsedPage
from link_scout.errors import FetchError, ParseError
from link_scout.ledger import VisitationLedger
from link_scout.models import CrawlReport, PageRecord
from link_scout.rate_limiter import RateLimiter
from link_scout.scope import in_scope

__all__ = ("CrawlOrchestrator", "SupportsFetch")

ParseFunc = Callable[[Union[str, bytes]], ParsedPage]
ResolveFunc = Callable[[str, str], str]


class SupportsFetch(Protocol):
    async def fetch(self, url: str) -> FetchResponse: ...


class CrawlOrchestrator:
    """Рекурсивный обход в ширину: одна asyncio-задача на каждый новый URL своего домена.

    Все задачи одного запуска живут в общей ``asyncio.TaskGroup``: дочерняя
    задача добавляется в группу до того, как родитель завершится, поэтому
    ``run`` возвращается только когда дерево задач полностью исчерпано.
    """

    def __init__(
        self,
        seed_url: str,
        max_depth: int,
        fetcher: SupportsFetch,
        rate_limiter: RateLimiter,
        ledger: Optional[VisitationLedger] = None,
        aggregator: Optional[ResultAggregator] = None,
        parse: ParseFunc = parse_page,
        resolve: ResolveFunc = resolve_url,
    ) -> None:
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        self.seed_url = seed_url
        self.max_depth = max_depth
        self.fetcher = fetcher
        self.rate_limiter = rate_limiter
        self.ledger = ledger if ledger is not None else VisitationLedger()
        self.aggregator = aggregator if aggregator is not None else ResultAggregator(seed_url, max_depth)
        self.parse = parse
        self.resolve = resolve
        self.logger = logging.getLogger("LinkScout")
        self._group: Optional[asyncio.TaskGroup] = None

    async def run(self) -> CrawlReport:
        """Обходит сайт начиная с seed и возвращает финальный отчёт."""
        self.logger.info("Старт обхода: %s (max depth %d)", self.seed_url, self.max_depth)
        # seed is keyed the same way as discovered links (fragment dropped)
        seed_key = self.resolve(self.seed_url, self.seed_url)
        async with asyncio.TaskGroup() as group:
            self._group = group
            self._spawn(seed_key, 0)
        self._group = None
        report = self.aggregator.finalize()
        self.logger.info("Crawling completed. Total pages visited: %d", self.ledger.count())
        return report

    def _spawn(self, url: str, depth: int) -> None:
        if self._group is None:
            raise RuntimeError("crawl tasks can only be spawned inside run()")
        self._group.create_task(self.crawl(url, depth))

    async def crawl(self, url: str, depth: int) -> None:
        """Обрабатывает один URL; результат уходит только в агрегатор."""
        if depth > self.max_depth:
            return
        if not self.ledger.claim(url):
            return
        try:
            await self._visit(url, depth)
        except Exception:
            self.logger.exception("Unexpected error while crawling %s", url)

    async def _visit(self, url: str, depth: int) -> None:
        await self.rate_limiter.wait_turn()
        self.logger.info("Crawling: %s (depth: %d)", url, depth)

        crawled_at = datetime.now(timezone.utc)
        started = time.perf_counter()
        try:
            response = await self.fetcher.fetch(url)
        except FetchError as exc:
            self.logger.warning("Error fetching %s: %s", url, exc.reason)
            return
        response_time_ms = int((time.perf_counter() - started) * 1000)

        if response.status != 200:
            self.logger.warning("Error: status code %d for %s", response.status, url)
            return

        try:
            page = self.parse(response.body)
        except ParseError as exc:
            self.logger.warning("Error parsing page %s: %s", url, exc)
            return

        links = self._follow_links(url, depth, page.hrefs)

        self.aggregator.record(
            PageRecord(
                url=url,
                title=page.title,
                links=tuple(links),
                depth=depth,
                crawled_at=crawled_at,
                response_time_ms=response_time_ms,
                status_code=response.status,
            )
        )

    def _follow_links(self, url: str, depth: int, hrefs: List[str]) -> List[str]:
        links: List[str] = []
        for raw in hrefs:
            href = raw.strip()
            if not href or href.startswith("#"):
                continue
            try:
                absolute = self.resolve(url, href)
            except ValueError:
                self.logger.debug("Skipping unresolvable href %r on %s", href, url)
                continue
            links.append(absolute)
            # out-of-scope links are listed but never crawled
            if in_scope(absolute, self.seed_url) and not self.ledger.is_claimed(absolute):
                self._spawn(absolute, depth + 1)
        return links
