[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uwvalues"
version = "0.1.0"
description = "Dynamically typed scalar values with a type registry, status codes, timestamps and JSON serialization"
requires-python = ">=3.10"
dependencies = []
keywords = ["values", "types", "type registry", "json", "status", "timestamp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uwvalues"]

[tool.pytest.ini_options]
addopts = "-ra"
