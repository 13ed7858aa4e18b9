[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daprsidecar"
version = "0.1.0"
description = "Actor configuration, request types, reminder scheduling rules, duration parsing and an in-memory state store for an application sidecar"
requires-python = ">=3.10"
dependencies = []
keywords = ["actors", "sidecar", "reminders", "durations", "state", "distributed"]
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
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["daprsidecar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
