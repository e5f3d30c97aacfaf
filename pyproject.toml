[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vbbs"
version = "0.1.0"
description = "Building blocks of a small bulletin board system: SHA-1, containers, logging, ANSI terminal handling and user accounts"
requires-python = ">=3.10"
dependencies = []
keywords = ["bbs", "bulletin-board", "terminal", "ansi", "sha1", "ring-buffer"]
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
    "Topic :: Communications :: BBS",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vbbs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
