[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lasertag"
version = "0.1.0"
description = "Thread-coordinated simulation of laser tag matches between two teams"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "concurrency", "threads", "semaphores", "laser tag"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
lasertag = "lasertag.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lasertag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
