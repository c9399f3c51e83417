[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "philosophers"
version = "1.0.0"
description = "A threaded simulation of the dining philosophers problem"
requires-python = ">=3.10"
keywords = ["dining philosophers", "threads", "concurrency", "simulation", "locks"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
philosophers = "philosophers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["philosophers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
