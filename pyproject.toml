[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aiutils"
version = "0.1.0"
description = "Core utilities: bit tricks, address hashing, C-style escaping, UTF-8 glyph lengths, sequence helpers, orderings, three-way merges and nested loops"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "bits", "escape", "utf8", "merge", "three-way-merge", "nested-loops", "sequences"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aiutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
