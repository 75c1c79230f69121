[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "md5chunks"
version = "0.1.0"
description = "A pure-Python MD5 digest built chunk by chunk, with a small command-line file hasher"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "hash", "digest", "checksum"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
md5chunks = "md5chunks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["md5chunks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
