[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuikit"
version = "1.0.0"
description = "Building blocks for text user interfaces: geometry, colours, events, listeners, an event queue, key maps and a border layout."
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "terminal", "layout", "events", "listeners", "colour"]
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
    "Environment :: Console",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
