[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "secrules"
version = "0.1.0"
description = "Building blocks of a security event rule engine: filter trees, macro substitution, event-type resolution and event-type indexed rulesets"
requires-python = ">=3.10"
keywords = ["security", "rules", "detection", "events", "filters"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["secrules"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
