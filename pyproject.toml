[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deckanneal"
version = "0.1.0"
description = "Simulated annealing for card-deck ordering against a field of opponent decks, with genetic tuning of annealing temperatures."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulated annealing", "optimization", "genetic algorithm", "card game", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deckanneal = "deckanneal.annealing:main"
deckanneal-tune = "deckanneal.tuning:main"

[tool.hatch.build.targets.wheel]
packages = ["deckanneal"]

[tool.pytest.ini_options]
addopts = "-ra"
