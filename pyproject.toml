[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jyamithika"
version = "0.1.0"
description = "Computational geometry primitives and algorithms: vectors, lines, planes, polygons, a doubly connected edge list and monotone partitioning."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "computational-geometry", "dcel", "polygon", "vector", "monotone-partition"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["jyamithika"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
