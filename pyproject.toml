[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minirdbms"
version = "0.1.0"
description = "Building blocks of a small relational database: fixed-size pages, page files, an LRU buffer pool, an ordered index, table locks, backups, user accounts, typed tables and command parsing."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "rdbms", "storage-engine", "buffer-pool", "lru", "pages", "index"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minirdbms"]

[tool.pytest.ini_options]
addopts = "-ra"
