[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abikit"
version = "0.1.0"
description = "Contract ABI type parsing, token encoding, constructor calls and event topic filters"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["abi", "encoding", "contract", "event", "keccak", "solidity"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["abikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
