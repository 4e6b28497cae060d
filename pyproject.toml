[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictax"
version = "0.1.0"
description = "Console tic-tac-toe: play as X against a simple computer opponent, with save and load."
requires-python = ">=3.10"
keywords = ["tic-tac-toe", "game", "console", "board game"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tictax = "tictax.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tictax"]

[tool.pytest.ini_options]
addopts = "-ra"
