[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "d2modgen"
version = "0.1.0"
description = "Building blocks for Diablo II mod generators: tab-separated tables, JSON documents, item attributes, text colour codes, logging and time points."
requires-python = ">=3.10"
dependencies = []
keywords = ["diablo", "d2", "mod", "modding", "txt", "tables"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["d2modgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
