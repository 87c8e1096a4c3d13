[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynprog"
version = "0.1.0"
description = "Classic dynamic-programming and sequence problems: Fibonacci, Tribonacci, stairs, house robbery, grid paths and arithmetic progressions."
requires-python = ">=3.10"
dependencies = []
keywords = ["dynamic programming", "fibonacci", "tribonacci", "algorithms", "grid paths"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["dynprog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
