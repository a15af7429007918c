[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilequest"
version = "0.1.0"
description = "A small top-down tile game: collect every item on a .ber map, then reach the exit."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tile", "puzzle", "pygame", "map"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilequest = "tilequest.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tilequest"]

[tool.pytest.ini_options]
addopts = "-ra"
