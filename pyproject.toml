[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repofetch"
version = "2.23.1"
description = "Styled, serialisable information fields for a terminal summary of a Git repository"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "terminal", "repository", "summary", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["repofetch"]

[tool.pytest.ini_options]
addopts = "-ra"
