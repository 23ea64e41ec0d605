[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifegrid"
version = "0.1.0"
description = "A pluggable cellular automaton engine with an interactive command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["game of life", "cellular automaton", "simulation", "conway"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lifegrid = "lifegrid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lifegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
