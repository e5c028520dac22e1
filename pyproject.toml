[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexcrawl"
version = "0.1.0"
description = "Game logic for a top-down dungeon crawler: pathfinding, projectiles, status effects, inventory, saves and HUD values"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "roguelike", "pathfinding", "a-star", "dungeon"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hexcrawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
