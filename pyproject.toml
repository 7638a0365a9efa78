[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boundedsims"
version = "0.1.0"
description = "Small producer/consumer simulations built around a thread-safe bounded buffer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "producer-consumer",
    "bounded-buffer",
    "threading",
    "concurrency",
    "simulation",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boundedsims-fibonacci = "boundedsims.fibonacci:main"
boundedsims-combinations = "boundedsims.combinations:main"
boundedsims-primes = "boundedsims.primes:main"
boundedsims-columbo = "boundedsims.columbo:main"
boundedsims-teletubbies = "boundedsims.teletubbies:main"
boundedsims-bar = "boundedsims.bar:main"
boundedsims-bakery = "boundedsims.bakery:main"
boundedsims-kitchen = "boundedsims.kitchen:main"
boundedsims-election = "boundedsims.election:main"
boundedsims-investigation = "boundedsims.investigation:main"

[tool.hatch.build.targets.wheel]
packages = ["boundedsims"]

[tool.pytest.ini_options]
addopts = "-ra"
