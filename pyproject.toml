[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cowdia"
version = "0.1.0"
description = "A small game engine core: vector, matrix and quaternion math, colors, rectangles, logging, plugins, scenes and a render loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "math", "vector", "matrix", "quaternion", "scene", "plugin", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cowdia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
