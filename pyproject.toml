[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "islandgame"
version = "0.1.0"
description = "A small top-down island game with spritesheets, frame animations and a texture cache"
requires-python = ">=3.10"
keywords = ["game", "pygame", "sprites", "animation", "spritesheet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
islandgame = "islandgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["islandgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
