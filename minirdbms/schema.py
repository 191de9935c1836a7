"""Typed values, column definitions and in-memory tables with a primary key."""

from __future__ import annotations

import logging
import struct
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

log = logging.getLogger(__name__)


class DataType(Enum):
    """Type of a column or value."""

    INT = "INT"
    STRING = "STRING"
    FLOAT = "FLOAT"
    BOOL = "BOOL"


def _single_precision(number: float) -> float:
    return struct.unpack("f", struct.pack("f", number))[0]


class Value:
    """A typed cell value: int, single-precision float, bool or string."""

    __slots__ = ("type", "data")

    def __init__(self, data: int | float | bool | str = "") -> None:
        if isinstance(data, bool):
            self.type = DataType.BOOL
            self.data: int | float | bool | str = data
        elif isinstance(data, int):
            self.type = DataType.INT
            self.data = data
        elif isinstance(data, float):
            self.type = DataType.FLOAT
            self.data = _single_precision(data)
        elif isinstance(data, str):
            self.type = DataType.STRING
            self.data = data
        else:
            raise TypeError(f"unsupported value type: {type(data).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.type is other.type and self.data == other.data

    def __hash__(self) -> int:
        return hash((self.type, self.data))

    def __repr__(self) -> str:
        return f"Value({self.data!r})"

    def __str__(self) -> str:
        if self.type is DataType.BOOL:
            return "true" if self.data else "false"
        if self.type is DataType.FLOAT:
            return f"{self.data:f}"
        return str(self.data)


@dataclass
class Column:
    """A named, typed column."""

    name: str
    type: DataType
    is_primary_key: bool = False


Row = dict[str, Value]


@dataclass
class Table:
    """A named table of rows keyed by column name, with an optional primary key."""

    name: str
    columns: list[Column] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)
    primary_key: str = ""

    def __init__(self, name: str) -> None:
        self.name = name
        self.columns = []
        self.rows = []
        self.primary_key = ""

    def add_column(self, name: str, data_type: DataType, is_primary_key: bool = False) -> None:
        """Append a column; a primary-key column becomes the table's primary key."""
        self.columns.append(Column(name, data_type, is_primary_key))
        if is_primary_key:
            self.primary_key = name
        log.info("Column added: %s%s", name, " [PRIMARY KEY]" if is_primary_key else "")

    def insert_row(self, values: Iterable[Value | int | float | bool | str]) -> None:
        """Append a row; raise ValueError on a wrong value count or a duplicate primary key."""
        cells = [v if isinstance(v, Value) else Value(v) for v in values]
        if len(cells) != len(self.columns):
            raise ValueError("Value count does not match column count")
        if self.primary_key:
            names = [column.name for column in self.columns]
            if self.primary_key not in names:
                raise ValueError(f"Primary key column not found: {self.primary_key}")
            key = cells[names.index(self.primary_key)]
            if any(row[self.primary_key] == key for row in self.rows):
                raise ValueError(f"Duplicate value for PRIMARY KEY '{self.primary_key}'")
        self.rows.append({column.name: cell for column, cell in zip(self.columns, cells)})

    def schema_text(self) -> str:
        """Return a description of the table's columns."""
        lines = ["--- Table Schema ---", f"Table: {self.name}", "Schema:"]
        for column in self.columns:
            suffix = " [PRIMARY KEY]" if column.is_primary_key else ""
            lines.append(f"- {column.name}: {column.type.value}{suffix}")
        return "\n".join(lines)

    def rows_text(self) -> str:
        """Return every row as ``column: value`` pairs."""
        lines = [f"--- Rows in Table: {self.name} ---"]
        for row in self.rows:
            lines.append(" | ".join(f"{c.name}: {row[c.name]}" for c in self.columns))
        return "\n".join(lines)