[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gobang"
version = "0.1.0"
description = "Console Gomoku (five in a row) with forbidden-move rules for Black and a simple computer opponent"
requires-python = ">=3.10"
dependencies = []
keywords = ["gomoku", "gobang", "five-in-a-row", "board-game", "renju"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gobang = "gobang.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gobang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
