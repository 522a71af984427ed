[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledgersim"
version = "1.0.0"
description = "A thread-safe in-memory bank ledger with a concurrent account simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "ledger", "accounts", "transfers", "threading", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ledgersim = "ledgersim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["ledgersim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
