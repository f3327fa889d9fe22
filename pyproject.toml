[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nextline"
version = "0.1.0"
description = "Read raw file descriptors one line at a time through a small fixed-size buffer."
requires-python = ">=3.10"
dependencies = []
keywords = ["readline", "file-descriptor", "lines", "buffering", "io"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nextline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
