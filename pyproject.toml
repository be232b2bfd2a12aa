[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "globalfee"
version = "0.1.0"
description = "Chain-wide minimum gas price parameters and a fee check for transactions"
requires-python = ">=3.10"
dependencies = []
keywords = ["fees", "gas", "blockchain", "ante-handler", "minimum-gas-prices"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["globalfee"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
