[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifostacks"
version = "0.1.0"
description = "Last-in, first-out stacks backed by a list or a deque, with stateful index iterators and JSON serialization."
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "lifo", "data-structures", "containers", "iterator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lifostacks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
