"""link_scout.scope: Проверка принадлежности URL домену обхода."""

from __future__ import annotations

from urllib.parse import urlsplit

__all__ = ["host_of", "in_scope"]


def host_of(url: str) -> str:
    """Возвращает host[:port] из URL без userinfo."""
    return urlsplit(url).netloc.rpartition("@")[2]


def in_scope(candidate: str, seed: str) -> bool:
    """True, если хост кандидата в точности совпадает с хостом seed (поддомены не считаются)."""
    return host_of(candidate) == host_of(seed)
