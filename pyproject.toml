[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netop"
version = "0.1.0"
description = "Node attribute lookup, manifest rendering and state reconciliation for cluster network components"
requires-python = ">=3.10"
keywords = ["kubernetes", "operator", "manifests", "templating", "reconciliation", "network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]
dependencies = [
    "jinja2",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["netop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
