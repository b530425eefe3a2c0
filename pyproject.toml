[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "armyduel"
version = "0.1.0"
description = "A console turn-based strategy duel: raise an army of the living and fight an undead bot, first to three wins."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "strategy", "console", "turn-based", "army"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
armyduel = "armyduel.game:main"

[tool.hatch.build.targets.wheel]
packages = ["armyduel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
