[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterlab"
version = "0.1.0"
description = "A small 3D graphics toolkit: vectors, matrices, homogeneous transformations, triangles and the simulation logic of several interactive scenes"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "transformations", "geometry", "matrices", "simulation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rasterlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
