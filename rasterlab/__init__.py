"""Vectors, matrices, homogeneous transformations, triangles and interactive scene logic."""

__version__ = "0.1.0"
__all__ = [
    "geometry",
    "transformations",
    "triangle",
    "controls",
    "orbits",
    "ball",
    "windmill",
    "clock",
    "dials",
    "rig",
    "swing",
]