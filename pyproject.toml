[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robotsiege"
version = "0.1.0"
description = "Game logic for a small 3D arcade shooter: defend a cannon against walking robots."
requires-python = ">=3.10"
keywords = ["game", "3d", "shooter", "robots", "simulation"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["robotsiege"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
