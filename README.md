# minirdbms

The building blocks of a small relational database, for learning how the
pieces of a database fit together. The package is a library: every module
can be used on its own from Python.

| Module | What it holds |
| --- | --- |
| `minirdbms.page` | `Page`, a block of `PAGE_SIZE` (4096) bytes holding a NUL-terminated `key=value,...` record |
| `minirdbms.file_manager` | `FileManager`, page-sized reads and writes of `.dbf` table files |
| `minirdbms.buffer_pool` | `BufferPool`, an LRU cache of pages |
| `minirdbms.b_plus_tree` | `BPlusTree`, an ordered mapping of integer keys to integer values |
| `minirdbms.storage_engine` | `StorageEngine`, one text record per integer key, stored through the three above |
| `minirdbms.schema` | `DataType`, `Value`, `Column` and `Table`, typed in-memory tables with a primary key |
| `minirdbms.conditions` | `split_operator`, `compare` and `validate_value` for typed cell comparisons |
| `minirdbms.parser` | `parse_full_command`, `CommandType` and `ParsedCommand` |
| `minirdbms.transaction` | `LockManager` and `LockType`, one exclusive lock per table |
| `minirdbms.recovery` | `RecoveryManager`, file backups and restores with a backup log |
| `minirdbms.access_control` | `AccessControl`, `User` and `Role` |

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Pages, the buffer pool and the index

```python
from minirdbms.page import Page
from minirdbms.buffer_pool import BufferPool
from minirdbms.b_plus_tree import BPlusTree

page = Page()
page.write_data("id=1,name=Alice,age=30")
page.has_column("name")            # True
page.update_column("name", "Bobby")
page.read_data()                   # "id=1,name=Bobby,age=30"

pool = BufferPool(3)
pool.add_page("p1", page)
"p1" in pool                       # True
pool.lru_order()                   # most recently used first
```

`BufferPool.add_page` stores a copy of the page and returns the id of the
page it evicted, or `None`. `get_page` returns a copy and raises `KeyError`
for a page that is not cached.

```python
tree = BPlusTree()
tree.insert(10, 100)
tree.insert(30, 300)
tree.search(10)                        # 100
tree.search(20)                        # -1 (NOT_FOUND)
tree.search_by_condition(250, ">")     # [30]
```

`search_by_condition` understands `=`, `>` and `<` and returns keys in
ascending order.

## Page files and the storage engine

`FileManager(root)` keeps its files in `root` (by default `data/tables`),
named `<name>.dbf`. It is a context manager that closes its files on exit.
`read_page` raises `EOFError` if the page lies past the end of the file.

```python
from minirdbms.file_manager import FileManager

with FileManager("tables") as files:
    files.create_file("students")
    files.open_file("students")
    files.write_page("students", 1, b"Test read-write data")
    files.read_page("students", 1)[:20]   # b"Test read-write data"
```

`StorageEngine` writes each record to the page numbered by its key, caches
it in a buffer pool and indexes it:

```python
from minirdbms.storage_engine import StorageEngine

with StorageEngine("students", buffer_size=5, root="tables") as engine:
    engine.insert(12, "name=Twelve")
    engine.insert(5, "name=Five")
    engine.search(12)                           # "name=Twelve"
    engine.select("students", "name", "10", ">")  # ["name=Twelve"]
    engine.update("name", "Dozen", "key", "10", ">")  # [12]
    engine.delete_from("students", "name", "10", "<")  # [5]
    print(engine.describe())
```

`search` raises `KeyError` for an unknown key. The conditions of `select`,
`update` and `delete_from` are compared against the indexed page numbers,
which are the keys themselves. `flush_all` writes every cached page back to
disk and returns the page ids it flushed.

## Typed tables and conditions

```python
from minirdbms.schema import DataType, Table

users = Table("Users")
users.add_column("id", DataType.INT, True)
users.add_column("name", DataType.STRING)
users.add_column("balance", DataType.FLOAT)
users.insert_row([1, "Alice", 1500.5])
print(users.schema_text())
print(users.rows_text())      # id: 1 | name: Alice | balance: 1500.500000
```

`insert_row` raises `ValueError` if the number of values does not match the
columns or if the primary key value is already present. Floats are held at
single precision.

```python
from minirdbms.conditions import compare, split_operator, validate_value

split_operator(">=100")              # (">=", "100")
compare("12", "3", "INT", ">")       # True
compare("abc", "abd", "STRING", "<") # False: text supports only = and !=
validate_value("1.5", "FLOAT")       # "1.5"
validate_value("x", "INT")           # raises QueryError
```

## Parsing commands

```python
from minirdbms.parser import CommandType, parse_full_command

cmd = parse_full_command("PUT key1 value1")
cmd.type                                  # CommandType.PUT
cmd.args                                  # ["key1", "value1"]
parse_full_command("FOOBAR x").type       # CommandType.INVALID
```

## Locks, backups and users

```python
from minirdbms.transaction import LockManager, LockType
from minirdbms.recovery import RecoveryManager
from minirdbms.access_control import AccessControl, Role

locks = LockManager()
locks.acquire_lock("users", LockType.WRITE)   # True
locks.acquire_lock("users", LockType.READ)    # False: already locked
locks.release_lock("users")

recovery = RecoveryManager("main.db", "backup_list.txt")
recovery.create_backup("backup1.bak")
recovery.list_backups()                       # ["backup1.bak"]
recovery.restore_backup("backup1.bak")

access = AccessControl()
access.add_user("admin", "password", Role.ADMIN)
access.authenticate("admin", "password")      # True
access.user_role("unknown")                   # Role.GUEST
```

`create_backup` and `restore_backup` raise `OSError` (for example
`FileNotFoundError`) when a file cannot be read or written.

## What the package does not do

There is no interactive console and no command to run: `parse_full_command`
only classifies a line, and nothing carries out the commands it recognises.
There is no query engine over named tables either. `Table` holds rows in
memory, but nothing here creates databases, selects from, updates, deletes
from, joins, groups, orders or indexes tables, and tables are not saved to
disk. The key-value records of `StorageEngine` are the only data the package
stores in files.