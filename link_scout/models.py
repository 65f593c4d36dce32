"""
Data models for the LinkScout crawler.

Both records are frozen: a :class:`PageRecord` belongs to the task that built
it until it is handed to the aggregator, and a :class:`CrawlReport` is a
snapshot returned by :meth:`ResultAggregator.finalize`.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Tuple

__all__ = ("PageRecord", "CrawlReport", "rfc3339")


def rfc3339(moment: datetime) -> str:
    """Format a timezone-aware datetime as an RFC 3339 timestamp."""
    return moment.isoformat()


@dataclass(frozen=True, slots=True)
class PageRecord:
    """One successfully fetched page."""

    url: str
    title: str
    links: Tuple[str, ...]
    depth: int
    crawled_at: datetime
    response_time_ms: int
    status_code: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "links": list(self.links),
            "depth": self.depth,
            "crawled_at": rfc3339(self.crawled_at),
            "response_time_ms": self.response_time_ms,
            "status_code": self.status_code,
        }


@dataclass(frozen=True, slots=True)
class CrawlReport:
    """Final result of one crawl run; pages are kept in completion order."""

    base_url: str
    max_depth: int
    start_time: datetime
    end_time: datetime
    total_pages: int
    pages: Tuple[PageRecord, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Return the report in its JSON wire shape."""
        return {
            "base_url": self.base_url,
            "max_depth": self.max_depth,
            "start_time": rfc3339(self.start_time),
            "end_time": rfc3339(self.end_time),
            "total_pages": self.total_pages,
            "pages": [page.to_dict() for page in self.pages],
        }
