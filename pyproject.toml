[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fakerfactory"
version = "0.1.0"
description = "Fake test data generators with an HTTP API that serves records as JSON"
requires-python = ">=3.10"
keywords = ["fake", "faker", "test data", "mock data", "generator", "http api"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]
dependencies = [
    "flask",
    "pymysql",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fakerfactory = "fakerfactory.server:main"
fakerfactory-cnarea = "fakerfactory.cnarea:main"

[tool.hatch.build.targets.wheel]
packages = ["fakerfactory"]

[tool.hatch.build.targets.sdist]
include = ["fakerfactory", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
