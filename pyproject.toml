[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventday"
version = "0.1.0"
description = "Runner and puzzle solutions for the yearly December programming calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solutions", "runner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventday = "adventday.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventday"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
