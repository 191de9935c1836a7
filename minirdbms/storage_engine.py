"""A paged key/record store backed by a table file, a buffer pool and an index."""

from __future__ import annotations

import logging
import os

from .b_plus_tree import NOT_FOUND, BPlusTree
from .buffer_pool import BufferPool
from .file_manager import DEFAULT_ROOT, FileManager
from .page import Page

log = logging.getLogger(__name__)


class StorageEngine:
    """Stores one text record per integer key, one page per key, in a table file."""

    def __init__(
        self,
        table_name: str,
        buffer_size: int = 5,
        root: str | os.PathLike[str] = DEFAULT_ROOT,
    ) -> None:
        self.table_name = table_name
        self._files = FileManager(root)
        self._pool = BufferPool(buffer_size)
        self._index = BPlusTree()
        self._files.create_file(table_name)
        self._files.open_file(table_name)

    def __enter__(self) -> StorageEngine:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _page_id(self, page_number: int) -> str:
        return f"{self.table_name}_{page_number}"

    def _load(self, page_number: int, cache: bool = True) -> Page:
        page_id = self._page_id(page_number)
        if page_id in self._pool:
            return self._pool.get_page(page_id)
        page = Page()
        page.load_raw(self._files.read_page(self.table_name, page_number))
        if cache:
            self._pool.add_page(page_id, page)
        return page

    def insert(self, key: int, value: str) -> None:
        """Write ``value`` to the page numbered ``key`` and index it."""
        page = Page()
        page.write_data(value)
        page_number = key
        self._files.write_page(self.table_name, page_number, page.raw_data())
        self._pool.add_page(self._page_id(page_number), page)
        self._index.insert(key, page_number)

    def search(self, key: int) -> str:
        """Return the record stored under ``key``; raise KeyError if there is none."""
        page_number = self._index.search(key)
        if page_number == NOT_FOUND:
            raise KeyError(f"Key not found: {key}")
        return self._load(page_number).read_data()

    def describe(self) -> str:
        """Return the index entries followed by the buffer pool's LRU order."""
        lines = [f"{key} : {value}" for key, value in self._index.items()]
        lines.append("Current LRU order:")
        lines.extend(f"- {page_id}" for page_id in self._pool.lru_order())
        return "\n".join(lines)

    def flush_all(self) -> list[str]:
        """Write every cached page back to disk; return the flushed page ids."""
        flushed = []
        for page_id, page in self._pool.items():
            filename, sep, number = page_id.rpartition("_")
            if not sep:
                continue
            self._files.write_page(filename, int(number), page.raw_data())
            log.info("Flushed page: %s to disk.", page_id)
            flushed.append(page_id)
        return flushed

    def update(
        self,
        column: str,
        new_value: str,
        condition_column: str,
        condition_value: str,
        operator: str,
    ) -> list[int]:
        """Set ``column`` in every record whose key satisfies the condition; return updated keys."""
        updated = []
        for key in self._index.search_by_condition(int(condition_value), operator):
            try:
                page = self._load(key)
            except EOFError:
                log.warning("Failed to load page for key: %s", key)
                continue
            if not page.has_column(column):
                log.info("Column %s not found in the page.", column)
                continue
            page.update_column(column, new_value)
            self._pool.add_page(self._page_id(key), page)
            self._files.write_page(self.table_name, key, page.raw_data())
            updated.append(key)
        if not updated:
            log.info("No records updated.")
        return updated

    def delete_from(
        self, table: str, column: str, condition_value: str, operator: str
    ) -> list[int]:
        """Drop every record whose key satisfies the condition; return deleted keys."""
        deleted = self._index.search_by_condition(int(condition_value), operator)
        for key in deleted:
            self._index.remove(key)
            self._pool.remove_page(self._page_id(key))
            log.info("Deleted record for key: %s", key)
        return deleted

    def select(
        self, table: str, column: str, condition_value: str, operator: str
    ) -> list[str]:
        """Return the records whose key satisfies the condition, in key order."""
        records = []
        for key in self._index.search_by_condition(int(condition_value), operator):
            try:
                page = self._load(key, cache=False)
            except EOFError:
                log.warning("Failed to load page for key: %s", key)
                continue
            records.append(page.read_data())
        return records

    def close(self) -> None:
        """Close the table file."""
        self._files.close()