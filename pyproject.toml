[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventhub"
version = "0.1.0"
description = "A small in-process event dispatcher: register handlers by event name and dispatch events to them."
requires-python = ">=3.10"
dependencies = []
keywords = ["events", "dispatcher", "observer", "pubsub", "handlers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eventhub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
