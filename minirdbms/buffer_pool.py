"""An LRU cache of pages held in memory."""

from __future__ import annotations

import logging
from collections import OrderedDict

from .page import Page

log = logging.getLogger(__name__)


def _clone(page: Page) -> Page:
    copy = Page()
    copy.load_raw(page.raw_data())
    return copy


class BufferPool:
    """Keeps at most ``capacity`` pages, evicting the least recently used one."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("buffer pool capacity must be at least 1")
        self.capacity = capacity
        # Least recently used first, most recently used last.
        self._pages: OrderedDict[str, Page] = OrderedDict()

    def __contains__(self, page_id: object) -> bool:
        return page_id in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def add_page(self, page_id: str, page: Page) -> str | None:
        """Cache a copy of ``page``; return the id of an evicted page, if any."""
        if page_id in self._pages:
            self._pages[page_id] = _clone(page)
            self._pages.move_to_end(page_id)
            return None
        evicted = None
        if len(self._pages) >= self.capacity:
            evicted, _ = self._pages.popitem(last=False)
            log.info("Evicted page: %s", evicted)
        self._pages[page_id] = _clone(page)
        return evicted

    def get_page(self, page_id: str) -> Page:
        """Return a copy of a cached page and mark it most recently used."""
        if page_id not in self._pages:
            raise KeyError(f"Page not in buffer pool: {page_id}")
        self._pages.move_to_end(page_id)
        return _clone(self._pages[page_id])

    def remove_page(self, page_id: str) -> None:
        """Drop a page from the cache if present."""
        self._pages.pop(page_id, None)

    def lru_order(self) -> list[str]:
        """Return page ids from most to least recently used."""
        return list(reversed(self._pages))

    def items(self) -> list[tuple[str, Page]]:
        """Return the cached ``(page_id, page)`` pairs."""
        return list(self._pages.items())