[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goconc"
version = "0.1.0"
description = "Go-style concurrency primitives for Python threads: channels, select, wait groups, once, pools, read-write locks, deferred calls, results and durations."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "channels",
    "select",
    "concurrency",
    "threads",
    "waitgroup",
    "defer",
    "duration",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["goconc"]

[tool.hatch.build.targets.sdist]
include = ["goconc", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
