[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "physimos"
version = "0.1.0"
description = "Headless core of a small physics world: vectors, camera, input state, wireframes, gravity and ground bounce."
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "simulation", "camera", "wireframe", "gravity", "rigid-body"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["physimos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
