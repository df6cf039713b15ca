[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "callcenter"
version = "0.1.0"
description = "A small call-center simulator with priority queues, an attendance history and a final report"
requires-python = ">=3.10"
dependencies = []
keywords = ["call center", "priority queue", "simulation", "support desk"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
callcenter = "callcenter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["callcenter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
