[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "limejudge"
version = "0.1.0"
description = "Compiler definitions, judge configuration and setup-form logic for a programming contest judge"
requires-python = ">=3.10"
dependencies = []
keywords = ["judge", "contest", "olympiad", "compiler", "testing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["limejudge"]

[tool.pytest.ini_options]
addopts = "-ra"
