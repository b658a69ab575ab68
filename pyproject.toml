[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flownodes"
version = "0.1.0"
description = "Dataflow node graph model: typed ports, connections, type converters, connection styles and example calculator nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["dataflow", "node-graph", "flow", "nodes", "visual-programming"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flownodes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
