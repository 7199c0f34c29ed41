[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jokerhand"
version = "1.0.0"
description = "Rules engine for a poker-hand roguelike deck builder: hands, jokers, blinds, shop and scoring animation."
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "poker", "roguelike", "deck-builder", "game"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jokerhand"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
