[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dasquare"
version = "0.1.0"
description = "Namespaces, share layout rules, data availability headers and blob commitment paths for namespaced data squares"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-availability",
    "namespace",
    "merkle",
    "shares",
    "commitment",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dasquare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
