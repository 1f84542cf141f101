[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfkit"
version = "0.1.0"
description = "Small building blocks: error numbers, containers, buffers, clocks, events, option parsing, a command tree, file helpers and logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "fifo", "hash table", "linked list", "logging", "cli", "options", "utilities"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
