[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argkit"
version = "1.0.0"
description = "A small command-line argument parser with int, string and flag arguments, positional and repeated values, defaults and help text."
requires-python = ">=3.10"
dependencies = []
keywords = ["command-line", "cli", "arguments", "options", "parser", "flags"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
argkit = "argkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["argkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
