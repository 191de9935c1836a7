"""Building blocks of a small relational database: pages, page files, an LRU buffer pool, an index, a storage engine, typed tables, conditions, command parsing, locks, backups and users."""

__version__ = "0.1.0"