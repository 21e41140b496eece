[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bcfileio"
version = "0.1.0"
description = "File handling and getopt-style option scanning for a Blowfish file encryption tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["blowfish", "encryption", "padding", "secure-delete", "getopt"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bcfileio"]

[tool.pytest.ini_options]
addopts = "-ra"
