import pytest

from minirdbms.recovery import RecoveryManager


@pytest.fixture
def setup(tmp_path):
    db_file = tmp_path / "main.db"
    db_file.write_bytes(b"DUMMY DATABASE CONTENT\n")
    manager = RecoveryManager(db_file, tmp_path / "backup_list.txt")
    return tmp_path, db_file, manager


def test_backup_list_and_restore(setup):
    tmp_path, db_file, manager = setup
    backup = tmp_path / "backup1.bak"

    manager.create_backup(backup)
    assert backup.read_bytes() == b"DUMMY DATABASE CONTENT\n"
    assert manager.list_backups() == [str(backup)]

    db_file.write_bytes(b"CHANGED")
    manager.restore_backup(backup)
    assert db_file.read_bytes() == b"DUMMY DATABASE CONTENT\n"


def test_multiple_backups_are_logged_in_order(setup):
    tmp_path, _, manager = setup
    first, second = tmp_path / "a.bak", tmp_path / "b.bak"
    manager.create_backup(first)
    manager.create_backup(second)
    assert manager.list_backups() == [str(first), str(second)]


def test_list_without_log_is_empty(tmp_path):
    manager = RecoveryManager(tmp_path / "db", tmp_path / "missing.txt")
    assert manager.list_backups() == []


def test_list_skips_blank_lines(tmp_path):
    log_file = tmp_path / "log.txt"
    log_file.write_text("one\n\ntwo\n")
    manager = RecoveryManager(tmp_path / "db", log_file)
    assert manager.list_backups() == ["one", "two"]


def test_backup_of_missing_database_raises(tmp_path):
    manager = RecoveryManager(tmp_path / "absent.db", tmp_path / "log.txt")
    with pytest.raises(FileNotFoundError):
        manager.create_backup(tmp_path / "x.bak")
    assert not (tmp_path / "log.txt").exists()


def test_restore_missing_backup_raises(setup):
    tmp_path, db_file, manager = setup
    with pytest.raises(FileNotFoundError):
        manager.restore_backup(tmp_path / "nope.bak")
    assert db_file.read_bytes() == b"DUMMY DATABASE CONTENT\n"