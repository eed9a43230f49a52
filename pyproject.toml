[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knighttour"
version = "0.1.0"
description = "Find a knight's tour on a 5x5 chess board from a given starting square"
requires-python = ">=3.10"
dependencies = []
keywords = ["knight", "tour", "chess", "puzzle", "backtracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
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
knighttour = "knighttour.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["knighttour"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
