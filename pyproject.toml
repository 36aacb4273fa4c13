[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mea"
version = "0.1.0"
description = "Analyze MySQL EXPLAIN FORMAT=JSON output and report scans, index usage and sorting issues"
requires-python = ">=3.10"
dependencies = [
    "rich",
]
keywords = ["mysql", "explain", "query", "performance", "index", "analyzer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mea = "mea.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mea"]

[tool.pytest.ini_options]
addopts = "-ra"
