[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeboard"
version = "0.1.0"
description = "A small terminal snake game with wraparound walls, regular and special food"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "curses", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakeboard = "snakeboard.game:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
