[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortbench"
version = "0.1.0"
description = "Benchmark merge sort against a merge/insertion hybrid on random, reversed and almost sorted data"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "sorting", "merge sort", "insertion sort", "hybrid sort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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

[project.scripts]
sortbench = "sortbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sortbench"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
