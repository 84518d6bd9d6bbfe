[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nextline"
version = "0.1.0"
description = "Read a file descriptor one line at a time through a fixed-size buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["readline", "file descriptor", "line reader", "buffer", "get_next_line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nextline = "nextline.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nextline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
