"""Splitting a command line into a command type and its arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CommandType(Enum):
    """Recognised commands."""

    INVALID = "invalid"
    PUT = "put"
    GET = "get"
    REMOVE = "remove"
    SHOW = "show"
    FLUSH = "flush"
    EXIT = "exit"
    CREATE_DATABASE = "create_database"
    ALTER_DATABASE = "alter_database"
    JOIN = "join"
    GROUP_BY = "group_by"
    ORDER = "order"
    MATCH = "match"
    LIMIT = "limit"
    DISTINCT = "distinct"
    CREATE_INDEX = "create_index"
    UPDATE = "update"


_COMMANDS = {t.value: t for t in CommandType if t is not CommandType.INVALID}


@dataclass
class ParsedCommand:
    """A command type with the words that followed it."""

    type: CommandType
    args: list[str] = field(default_factory=list)


def parse_full_command(text: str) -> ParsedCommand:
    """Parse a line; the first word selects the command, case-insensitively."""
    tokens = text.split()
    if not tokens:
        return ParsedCommand(CommandType.INVALID)
    command = _COMMANDS.get(tokens[0].lower(), CommandType.INVALID)
    return ParsedCommand(command, tokens[1:])