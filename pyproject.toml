[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocollection"
version = "0.1.0"
description = "Classic algorithms: sorting, graph searches, shortest paths, spanning trees, greedy methods and subarray sums"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "graphs",
    "shortest-path",
    "spanning-tree",
    "kadane",
    "heap",
    "priority-queue",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algocollection"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
