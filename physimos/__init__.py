"""Headless physics-world core: vectors, camera, input state, wireframes, world objects, simulation and scene stepping."""

__version__ = "0.1.0"