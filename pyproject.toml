[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftformat"
version = "0.1.0"
description = "A small printf-style formatter with field width, precision and flag handling, plus string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "string", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftformat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
