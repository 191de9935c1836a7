"""Page-oriented access to table files on disk."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from .page import PAGE_SIZE

DEFAULT_ROOT = os.path.join("data", "tables")


class FileManager:
    """Creates, opens and reads/writes fixed-size pages of ``.dbf`` table files."""

    def __init__(self, root: str | os.PathLike[str] = DEFAULT_ROOT) -> None:
        self.root = Path(root)
        self._open_files: dict[str, BinaryIO] = {}

    def _resolve(self, filename: str) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root / f"{filename}.dbf"

    def _handle(self, filename: str) -> BinaryIO:
        try:
            return self._open_files[filename]
        except KeyError:
            raise KeyError(f"file not open: {filename}") from None

    def create_file(self, filename: str) -> Path:
        """Create (or truncate) the table file and return its path."""
        path = self._resolve(filename)
        path.write_bytes(b"")
        return path

    def open_file(self, filename: str) -> None:
        """Open an existing table file for reading and writing."""
        handle = open(self._resolve(filename), "r+b")
        previous = self._open_files.pop(filename, None)
        if previous is not None:
            previous.close()
        self._open_files[filename] = handle

    def close_file(self, filename: str) -> None:
        """Close a table file if it is open."""
        handle = self._open_files.pop(filename, None)
        if handle is not None:
            handle.close()

    def write_page(self, filename: str, page_number: int, data: bytes) -> None:
        """Write ``data``, zero-padded to PAGE_SIZE, as page ``page_number``."""
        if page_number < 0:
            raise ValueError("page number must not be negative")
        if len(data) > PAGE_SIZE:
            raise ValueError(f"page data exceeds {PAGE_SIZE} bytes")
        handle = self._handle(filename)
        handle.seek(page_number * PAGE_SIZE)
        handle.write(bytes(data).ljust(PAGE_SIZE, b"\0"))
        handle.flush()

    def read_page(self, filename: str, page_number: int) -> bytes:
        """Read page ``page_number``; raise EOFError if the file is too short."""
        if page_number < 0:
            raise ValueError("page number must not be negative")
        handle = self._handle(filename)
        handle.seek(page_number * PAGE_SIZE)
        data = handle.read(PAGE_SIZE)
        if len(data) < PAGE_SIZE:
            raise EOFError(f"page {page_number} of {filename} is incomplete")
        return data

    def close(self) -> None:
        """Close every open file."""
        for filename in list(self._open_files):
            self.close_file(filename)

    def __enter__(self) -> FileManager:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()