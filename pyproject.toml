[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicomp"
version = "0.1.0"
description = "A small compiler that turns programs in a tiny symbolic language into accumulator assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "parser", "scanner", "assembly", "recursive-descent"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minicomp = "minicomp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minicomp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
