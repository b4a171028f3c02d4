[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ntap"
version = "0.7.0"
description = "State, rendering and key handling for terminal views of network traffic"
requires-python = ">=3.10"
keywords = ["network", "monitoring", "traffic", "terminal", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]
dependencies = [
    "rich",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ntap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
