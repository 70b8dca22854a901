[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redcmd"
version = "0.1.0"
description = "Build Redis command argument lists for keys, strings, hashes, lists, sets, sorted sets, ACL, geo, streams and RedisJSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "commands", "arguments", "database", "redisjson", "geospatial", "streams"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["redcmd"]

[tool.pytest.ini_options]
addopts = "-ra"
