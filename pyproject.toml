[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lgenkit"
version = "0.1.0"
description = "Context-free grammars, FIRST/FOLLOW sets, LR(0) items and SLR(1) parsers, with a small token-declaration language built on top."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "grammar",
    "parser",
    "slr",
    "lr0",
    "compiler",
    "first-follow",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lgenkit"]

[tool.hatch.build.targets.sdist]
include = ["lgenkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
