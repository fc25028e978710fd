[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubefour"
version = "0.1.0"
description = "Four-in-a-row on a 4x4x4 cube, with a learning alpha-beta computer opponent"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "board-game",
    "connect-four",
    "3d",
    "alpha-beta",
    "minimax",
    "ai",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubefour = "cubefour.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubefour"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
