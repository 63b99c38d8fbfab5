[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshspawn"
version = "0.1.0"
description = "Procedural triangle-mesh growth on a spatial index, with a free-flying camera, keyboard input model and OBJ loader"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["mesh", "procedural", "quadtree", "octree", "camera", "obj", "simulation"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["meshspawn"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
