from minirdbms.transaction import LockManager, LockType


def run_transaction(manager, table):
    acquired = manager.acquire_lock(table, LockType.WRITE)
    if acquired:
        manager.release_lock(table)
    return acquired


def test_transaction_sequence():
    manager = LockManager()
    assert run_transaction(manager, "users") is True

    assert manager.acquire_lock("users", LockType.WRITE) is True
    assert run_transaction(manager, "users") is False
    manager.release_lock("users")

    assert run_transaction(manager, "users") is True
    assert manager.is_locked("users") is False


def test_is_locked():
    manager = LockManager()
    assert manager.is_locked("orders") is False
    manager.acquire_lock("orders", LockType.READ)
    assert manager.is_locked("orders") is True
    assert manager.is_locked("users") is False


def test_read_lock_is_exclusive_too():
    manager = LockManager()
    assert manager.acquire_lock("t", LockType.READ) is True
    assert manager.acquire_lock("t", LockType.READ) is False


def test_release_unlocked_table_is_harmless():
    manager = LockManager()
    manager.release_lock("never")
    assert manager.acquire_lock("never", LockType.WRITE) is True