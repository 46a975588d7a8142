[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bojsolve"
version = "0.1.0"
description = "Solutions to classic competitive-programming exercises: searching, sorting, containers and graph traversal."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "bfs",
    "dfs",
    "heap",
    "sorting",
    "exercises",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bojsolve = "bojsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bojsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
