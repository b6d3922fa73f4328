[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameresources"
version = "0.1.0"
description = "Caching managers for pygame game assets: images, fonts, audio, JSON and custom data."
requires-python = ">=3.10"
keywords = ["pygame", "game", "assets", "resources", "cache"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gameresources"]

[tool.pytest.ini_options]
addopts = "-ra"
