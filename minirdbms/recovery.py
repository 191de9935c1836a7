"""Backup and restore of the database file."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULT_BACKUP_LOG = "backup_list.txt"


class RecoveryManager:
    """Copies the database file to named backups and back, keeping a log of backups."""

    def __init__(
        self,
        db_file: str | os.PathLike[str],
        backup_log: str | os.PathLike[str] = DEFAULT_BACKUP_LOG,
    ) -> None:
        self.db_file = Path(db_file)
        self.backup_log = Path(backup_log)

    def create_backup(self, backup_name: str | os.PathLike[str]) -> None:
        """Copy the database file to ``backup_name`` and record it in the log."""
        shutil.copyfile(self.db_file, backup_name)
        with open(self.backup_log, "a", encoding="utf-8") as log_file:
            log_file.write(f"{os.fspath(backup_name)}\n")

    def list_backups(self) -> list[str]:
        """Return the recorded backup names, oldest first."""
        try:
            text = self.backup_log.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.warning("Backup log file not found: %s", self.backup_log)
            return []
        return [name for name in text.splitlines() if name]

    def restore_backup(self, backup_name: str | os.PathLike[str]) -> None:
        """Overwrite the database file with the contents of ``backup_name``."""
        shutil.copyfile(backup_name, self.db_file)