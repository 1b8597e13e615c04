[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrabblepp"
version = "0.1.0"
description = "Scrabble game structures: board, racks, dictionary, player tree and scoring, with Graphviz reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["scrabble", "game", "board-game", "graphviz"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scrabblepp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
