[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grinminer"
version = "4.0.0"
description = "Cuckatoo cycle finder, siphash key derivation, stratum message types and mining statistics for Grin"
requires-python = ">=3.10"
dependencies = []
keywords = ["grin", "mimblewimble", "mining", "stratum", "cuckatoo", "cuckoo-cycle"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["grinminer"]

[tool.hatch.build.targets.sdist]
include = ["grinminer", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
