[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lizard"
version = "0.1.0"
description = "Typed variables, expressions, routines and rules for a line-oriented control language, with CANopen helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "expressions", "routines", "rules", "canopen", "automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lizard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
