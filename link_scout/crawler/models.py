# link_scout/crawler/models.py
"""
Data exchanged between the crawl orchestrator and its fetch/parse collaborators.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping


@dataclass(slots=True)
class FetchResponse:
    """Raw HTTP response of a single GET: status, headers and undecoded body."""

    url: str
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(slots=True)
class ParsedPage:
    """Title and raw ``href`` values of a page, in document order."""

    title: str
    hrefs: List[str] = field(default_factory=list)
