[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pongus"
version = "0.1.0"
description = "A two-paddle arcade Pong game with player-vs-player and player-vs-bot modes"
requires-python = ">=3.10"
keywords = ["pong", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pongus = "pongus.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pongus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
