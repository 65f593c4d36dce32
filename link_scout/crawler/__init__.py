"""link_scout.crawler: оркестратор обхода и его сетевые/парсинговые коллабораторы."""

from .crawler import CrawlOrchestrator, SupportsFetch
from .fetcher import Fetcher
from .link_extractor import parse_page, resolve_url
from .models import FetchResponse, ParsedPage

__all__ = [
    "CrawlOrchestrator",
    "SupportsFetch",
    "Fetcher",
    "FetchResponse",
    "ParsedPage",
    "parse_page",
    "resolve_url",
]
