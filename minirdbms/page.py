"""Fixed-size data pages holding a NUL-terminated text record."""

from __future__ import annotations

from collections.abc import Iterator

PAGE_SIZE = 4096
"""Size of one page in bytes."""


class Page:
    """A block of PAGE_SIZE bytes storing a comma-separated ``key=value`` record."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = bytearray(PAGE_SIZE)

    def __repr__(self) -> str:
        return f"Page({self.read_data()!r})"

    def write_data(self, text: str) -> None:
        """Store ``text``, truncated so that a terminating NUL always fits."""
        encoded = text.encode("utf-8").split(b"\0", 1)[0][: PAGE_SIZE - 1]
        self._data[:] = encoded.ljust(PAGE_SIZE, b"\0")

    def read_data(self) -> str:
        """Return the text stored up to the first NUL byte."""
        end = self._data.find(0)
        content = self._data if end < 0 else self._data[:end]
        return bytes(content).decode("utf-8", errors="replace")

    def raw_data(self) -> bytes:
        """Return all PAGE_SIZE bytes of the page."""
        return bytes(self._data)

    def load_raw(self, raw: bytes) -> None:
        """Replace the page contents with ``raw``, zero-padded to PAGE_SIZE."""
        if len(raw) > PAGE_SIZE:
            raise ValueError(f"raw page data exceeds {PAGE_SIZE} bytes")
        self._data[:] = bytes(raw).ljust(PAGE_SIZE, b"\0")

    def _fields(self) -> Iterator[tuple[str, str]]:
        for token in self.read_data().split(","):
            key, sep, value = token.partition("=")
            if sep:
                yield key, value

    def has_column(self, column: str) -> bool:
        """Return whether the record holds a field named ``column``."""
        return any(key == column for key, _ in self._fields())

    def update_column(self, column: str, new_value: str) -> None:
        """Set every field named ``column`` to ``new_value``; unknown columns leave the page as is."""
        updated = False
        tokens = []
        for key, value in self._fields():
            if key == column:
                value = new_value
                updated = True
            tokens.append(f"{key}={value}")
        if updated:
            self.write_data(",".join(tokens))