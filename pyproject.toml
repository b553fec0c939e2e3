[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowemu"
version = "0.1.0"
description = "Core types for a local blockchain emulator: errors, execution results, account storage and result logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "emulator", "transactions", "scripts", "errors", "results"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flowemu"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
