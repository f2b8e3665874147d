[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchtimers"
version = "0.1.0"
description = "Process and thread CPU time, a steady wall clock and RFC 3339 local timestamps for benchmarking"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "timing", "cpu-time", "clock", "rfc3339"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["benchtimers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
