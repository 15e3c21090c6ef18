[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kilodb"
version = "0.1.0"
description = "A small single-threaded in-memory key-value server speaking the Redis RESP protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "resp", "key-value", "database", "server"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kilodb = "kilodb.server:main"

[tool.hatch.build.targets.wheel]
packages = ["kilodb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
