[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robocar"
version = "0.1.0"
description = "UDP remote-control client for a robot car, with mesh index containers and 3x3 matrix math"
requires-python = ">=3.10"
dependencies = []
keywords = ["robot", "remote-control", "udp", "mesh", "matrix", "geometry"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robocar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
