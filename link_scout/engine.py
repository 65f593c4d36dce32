# File: link_scout/engine.py
"""link_scout.engine: Сборка компонентов одного запуска обхода и получение отчёта."""

from __future__ import annotations

from typing import Optional

from link_scout.aggregator import ResultAggregator
from link_scout.config import CrawlerConfig
from link_scout.crawler.crawler import CrawlOrchestrator, SupportsFetch
from link_scout.crawler.fetcher import Fetcher
from link_scout.ledger import VisitationLedger
from link_scout.models import CrawlReport
from link_scout.rate_limiter import RateLimiter

__all__ = ["build_orchestrator", "start_crawl"]


def build_orchestrator(config: CrawlerConfig, fetcher: SupportsFetch) -> CrawlOrchestrator:
    """Создаёт свежие ledger, limiter и агрегатор: по одному экземпляру на запуск."""
    return CrawlOrchestrator(
        seed_url=config.base_url,
        max_depth=config.max_depth,
        fetcher=fetcher,
        rate_limiter=RateLimiter(config.requests_per_second),
        ledger=VisitationLedger(),
        aggregator=ResultAggregator(config.base_url, config.max_depth),
    )


async def start_crawl(config: CrawlerConfig, fetcher: Optional[SupportsFetch] = None) -> CrawlReport:
    """
    Запускает обход и возвращает финальный CrawlReport.

    Если fetcher не передан, открывается штатный aiohttp-Fetcher на время запуска.
    """
    if fetcher is not None:
        return await build_orchestrator(config, fetcher).run()
    async with Fetcher(config) as default_fetcher:
        return await build_orchestrator(config, default_fetcher).run()

