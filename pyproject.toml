[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argtable"
version = "0.1.0"
description = "Table-driven command-line option parsing with GNU-style syntax and glossary output"
requires-python = ">=3.10"
dependencies = []
keywords = ["command-line", "options", "getopt", "argument-parsing", "cli", "hashtable"]
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
    "Topic :: Software Development :: Libraries",
    "Environment :: Console",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["argtable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
