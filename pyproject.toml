[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flexlayout"
version = "0.3.0"
description = "A flexbox layout container for text user interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "flexbox", "layout", "terminal"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flexlayout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
