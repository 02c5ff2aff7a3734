[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whisker"
version = "0.1.0"
description = "Core utilities for an entity-component-system runtime: typed indices, component handlers, logging, timing and checksums."
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "index", "crc32", "benchmark", "logging"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["whisker"]

[tool.pytest.ini_options]
addopts = "-ra"
