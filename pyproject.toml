[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booklending"
version = "0.1.0"
description = "A small library lending manager: books, readers, loans and a plain-text data file."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "lending", "catalogue", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
booklending = "booklending.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["booklending"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
