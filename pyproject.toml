[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitchest"
version = "0.1.0"
description = "A lightweight in-memory key-value database server speaking a RESP-style protocol, with an interactive client."
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "in-memory", "database", "resp", "cache", "server"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitchest = "bitchest.server:main"
bitchest-cli = "bitchest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bitchest"]

[tool.pytest.ini_options]
addopts = "-ra"
