[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tellerdesk"
version = "0.1.0"
description = "A small console bank and ATM for managing customer accounts kept in a local file"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "atm", "accounts", "console", "teller"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tellerdesk = "tellerdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tellerdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
