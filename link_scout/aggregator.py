# File: link_scout/aggregator.py
"""link_scout.aggregator: Потокобезопасный сборщик результатов обхода."""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import List, Optional

from link_scout.models import CrawlReport, PageRecord

__all__ = ["ResultAggregator"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResultAggregator:
    """Накапливает PageRecord от параллельных задач и собирает итоговый CrawlReport."""

    def __init__(
        self, base_url: str, max_depth: int, start_time: Optional[datetime] = None
    ) -> None:
        self.base_url = base_url
        self.max_depth = max_depth
        self.start_time = start_time or _utcnow()
        self._pages: List[PageRecord] = []
        self._lock = threading.Lock()
        self._report: Optional[CrawlReport] = None

    def record(self, page: PageRecord) -> None:
        """Добавляет запись страницы; порядок — порядок завершения задач."""
        with self._lock:
            if self._report is not None:
                raise RuntimeError("aggregator already finalized")
            self._pages.append(page)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pages)

    def finalize(self) -> CrawlReport:
        """
        Фиксирует время окончания и количество страниц, возвращает неизменяемый отчёт.

        Вызывается ровно один раз, после завершения всех задач обхода.
        """
        with self._lock:
            if self._report is not None:
                raise RuntimeError("aggregator already finalized")
            pages = tuple(self._pages)
            self._report = CrawlReport(
                base_url=self.base_url,
                max_depth=self.max_depth,
                start_time=self.start_time,
                end_time=max(_utcnow(), self.start_time),
                total_pages=len(pages),
                pages=pages,
            )
            return self._report
