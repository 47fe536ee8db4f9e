[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fifocache"
version = "0.1.0"
description = "A thread-safe in-memory key/value cache with S3-FIFO eviction through small, main and ghost queues."
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "s3-fifo", "eviction", "in-memory", "fifo"]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fifocache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
