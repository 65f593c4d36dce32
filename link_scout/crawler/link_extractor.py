"""
Page parsing and href resolution for LinkScout.
"""
from __future__ import annotations

from typing import List, Union
from urllib.parse import urldefrag, urljoin, urlsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from link_scout.crawler.models import ParsedPage
from link_scout.errors import ParseError

__all__ = ("parse_page", "resolve_url")


def parse_page(body: Union[str, bytes]) -> ParsedPage:
    """
    Extract the <title> text and every raw <a href> value, in document order.

    Hrefs are returned untouched (only surrounding whitespace removed);
    filtering and resolution happen in the orchestrator.
    """
    try:
        soup = BeautifulSoup(body, "html.parser")
    except Exception as exc:
        raise ParseError(f"unparseable document: {exc}") from exc

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if isinstance(title_tag, Tag) else ""

    hrefs: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if isinstance(href_val, str):
            hrefs.append(href_val.strip())
    return ParsedPage(title=title, hrefs=hrefs)


def resolve_url(base: str, href: str) -> str:
    """
    Resolve *href* against *base* and drop the fragment.

    Raises ValueError when either side is not a parseable URL.
    """
    absolute = urljoin(base, href)
    parts = urlsplit(absolute)
    if parts.scheme in ("http", "https") and not parts.hostname:
        raise ValueError(f"no host in {absolute!r}")
    if parts.port is not None and not 0 < parts.port < 65536:
        raise ValueError(f"bad port in {absolute!r}")
    return urldefrag(absolute).url
