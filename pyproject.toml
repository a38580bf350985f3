[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokustep"
version = "0.1.0"
description = "Interactive Sudoku board with a step-by-step backtracking solver you can watch, pause and reset"
requires-python = ">=3.10"
keywords = ["sudoku", "backtracking", "puzzle", "solver", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sudokustep = "sudokustep.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokustep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
