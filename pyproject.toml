[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wspbnb"
version = "0.1.0"
description = "Exact solver for the wandering salesman problem using branch and bound, with serial and multi-worker strategies"
requires-python = ">=3.10"
dependencies = []
keywords = ["wandering salesman", "tsp", "branch and bound", "optimization", "parallel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
wspbnb-serial = "wspbnb.serial:main"
wspbnb-round-robin = "wspbnb.round_robin:main"
wspbnb-dynamic = "wspbnb.dynamic:main"

[tool.hatch.build.targets.wheel]
packages = ["wspbnb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
