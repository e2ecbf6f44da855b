[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robotx"
version = "4.0.0"
description = "Node graph model for wiring robot processing nodes, with .x graph files, Graphviz dot export and node code scaffolding"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "node graph", "dataflow", "graphviz", "dot", "code generation", "scaffolding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
robotx = "robotx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["robotx"]

[tool.hatch.build.targets.sdist]
include = ["robotx", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["robotx"]
