[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdem"
version = "0.1.0"
description = "Texas hold'em hand evaluation, best-hand selection and cryptographically shuffled decks"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas-holdem", "hand-evaluator", "cards", "shuffle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["holdem"]

[tool.pytest.ini_options]
addopts = "-ra"
