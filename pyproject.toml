[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estructuras-tad"
version = "0.1.0"
description = "Abstract data types (lists, AVL trees, hash tables) with small console programs built on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "avl", "hash table", "lists", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
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
tad-benchmark = "estructuras_tad.benchmark:main"
tad-vacunacion = "estructuras_tad.vacunacion:main"

[tool.hatch.build.targets.wheel]
packages = ["estructuras_tad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
