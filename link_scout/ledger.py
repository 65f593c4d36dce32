"""
Visitation ledger: the set of URLs already owned by a crawl task.

``claim`` is the only way to take ownership of a URL, and it is a single
check-and-set under one lock, so two racing tasks can never both win.
"""
from __future__ import annotations

import threading
from typing import Set

__all__ = ("VisitationLedger",)


class VisitationLedger:
    """Thread-safe, grow-only set of claimed URLs for one crawl run."""

    def __init__(self) -> None:
        self._claimed: Set[str] = set()
        self._lock = threading.Lock()

    def claim(self, url: str) -> bool:
        """Mark *url* as claimed; return False if someone already owns it."""
        with self._lock:
            if url in self._claimed:
                return False
            self._claimed.add(url)
            return True

    def is_claimed(self, url: str) -> bool:
        """Cheap read before spawning; ownership is still decided by :meth:`claim`."""
        with self._lock:
            return url in self._claimed

    def count(self) -> int:
        """Number of URLs claimed so far, failed fetches included."""
        with self._lock:
            return len(self._claimed)

    def __len__(self) -> int:
        return self.count()
