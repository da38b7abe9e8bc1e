[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoprobs"
version = "0.1.0"
description = "Classic algorithm problems on trees, lists, stacks, arrays, strings and numbers, with the small data structures they use."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "binary-tree", "linked-list", "stack", "queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["algoprobs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
