"""Table-level locking for transactions."""

from __future__ import annotations

import logging
from enum import Enum

log = logging.getLogger(__name__)


class LockType(Enum):
    """Kind of lock requested."""

    READ = "read"
    WRITE = "write"


class LockManager:
    """Grants one exclusive lock per table, whatever the lock type."""

    def __init__(self) -> None:
        self._locked: set[str] = set()

    def acquire_lock(self, table_name: str, lock_type: LockType = LockType.WRITE) -> bool:
        """Lock ``table_name``; return False if it is already locked."""
        if table_name in self._locked:
            log.info("Table '%s' is already locked", table_name)
            return False
        log.info("Acquiring new %s lock on table: %s", lock_type.value, table_name)
        self._locked.add(table_name)
        return True

    def release_lock(self, table_name: str) -> None:
        """Release the lock on ``table_name`` if held."""
        log.info("Releasing lock on table: %s", table_name)
        self._locked.discard(table_name)

    def is_locked(self, table_name: str) -> bool:
        """Return whether ``table_name`` is locked."""
        return table_name in self._locked