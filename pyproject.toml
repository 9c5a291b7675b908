[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ballz"
version = "1.0.0"
description = "A brick-breaking arcade game: aim, launch a stream of balls and keep the blocks from reaching the floor."
requires-python = ">=3.10"
keywords = ["game", "arcade", "ballz", "pygame", "bricks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
ballz = "ballz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ballz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
