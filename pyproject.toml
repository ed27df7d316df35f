[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitflagset"
version = "0.1.0"
description = "Typed sets of named bit flags with set operations, iteration and a text format"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitflags", "flags", "bitmask", "bitset", "parsing"]
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
packages = ["bitflagset"]

[tool.pytest.ini_options]
addopts = "-ra"
