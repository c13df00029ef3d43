[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squarematrix"
version = "0.1.0"
description = "Square integer and floating-point matrices with overflow-checked arithmetic and an interactive menu"
requires-python = ">=3.10"
keywords = ["matrix", "linear algebra", "square matrix", "interactive", "overflow"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
squarematrix = "squarematrix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["squarematrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
