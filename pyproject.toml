[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duelquest"
version = "0.1.0"
description = "A small tile-map adventure where walking into a character on the map starts a duel"
requires-python = ">=3.10"
keywords = ["game", "rpg", "tilemap", "tmx", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
duelquest = "duelquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["duelquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
