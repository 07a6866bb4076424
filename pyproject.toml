[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fashionpong"
version = "0.1.0"
description = "A Pong arcade game with fashion-themed power-ups, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pong", "arcade", "game", "pygame", "power-ups"]
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fashionpong = "fashionpong.game:main"

[tool.hatch.build.targets.wheel]
packages = ["fashionpong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
