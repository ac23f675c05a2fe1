"""Built-in vertex data: debug shapes and the rigid-body collision cube."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

Vertex = tuple[float, float, float]

TRIANGLE_POINTS: tuple[float, ...] = (
    0.0, 1.0, -1.0,
    0.0, -1.0, -1.0,
    0.0, 0.0, 1.0,
    0.0, 1.0, -1.0,
    0.0, -1.0, -1.0,
    0.0, 0.0, 1.0,
)

# Wireframe cube drawn as line pairs.
SIMULATOR_POINTS: tuple[float, ...] = (
    # front face
    -1.0, 1.0, -1.0,
    -1.0, -1.0, -1.0,
    -1.0, -1.0, -1.0,
    -1.0, -1.0, 1.0,
    -1.0, -1.0, 1.0,
    -1.0, 1.0, 1.0,
    -1.0, 1.0, 1.0,
    -1.0, 1.0, -1.0,
    # back face
    1.0, 1.0, -1.0,
    1.0, -1.0, -1.0,
    1.0, -1.0, -1.0,
    1.0, -1.0, 1.0,
    1.0, -1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, -1.0,
    # edges linking the faces
    -1.0, 1.0, -1.0,
    1.0, 1.0, -1.0,
    -1.0, -1.0, -1.0,
    1.0, -1.0, -1.0,
    -1.0, -1.0, 1.0,
    1.0, -1.0, 1.0,
    -1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
)

_H = 1.01

RIGID_CUBE_VERTICES: tuple[float, ...] = (
    -_H, _H, _H,  -_H, _H, -_H,  -_H, -_H, -_H,
    -_H, -_H, _H,  -_H, _H, _H,  -_H, -_H, -_H,
    _H, _H, _H,  _H, _H, -_H,  _H, -_H, -_H,
    _H, -_H, _H,  _H, _H, _H,  _H, -_H, -_H,
    -_H, -_H, _H,  -_H, -_H, -_H,  _H, -_H, -_H,
    _H, -_H, _H,  -_H, -_H, _H,  _H, -_H, -_H,
    -_H, _H, _H,  -_H, _H, -_H,  _H, _H, -_H,
    _H, _H, _H,  -_H, _H, _H,  _H, _H, -_H,
    -_H, -_H, -_H,  -_H, _H, -_H,  _H, _H, -_H,
    _H, -_H, -_H,  -_H, -_H, -_H,  _H, _H, -_H,
    -_H, -_H, _H,  -_H, _H, _H,  _H, _H, _H,
    _H, -_H, _H,  -_H, -_H, _H,  _H, _H, _H,
)


def iter_vertices(flat: Iterable[float]) -> Iterator[Vertex]:
    """Group a flat sequence of coordinates into (x, y, z) triples."""
    values = list(flat)
    if len(values) % 3:
        raise ValueError(f"coordinate count {len(values)} is not a multiple of 3")
    for start in range(0, len(values), 3):
        x, y, z = values[start:start + 3]
        yield (x, y, z)


@dataclass
class RigidBody:
    """Collision geometry: a triangulated cube slightly larger than unit size."""

    vertices: list[float] = field(default_factory=lambda: list(RIGID_CUBE_VERTICES))
    global_vertices: list[float] = field(default_factory=list)

    def iter_vertices(self) -> Iterator[Vertex]:
        """Yield the body's local vertices as (x, y, z) triples."""
        return iter_vertices(self.vertices)

    @classmethod
    def from_vertices(cls, vertices: Sequence[Vertex]) -> RigidBody:
        """Build a body from a sequence of (x, y, z) triples."""
        return cls(vertices=[c for vertex in vertices for c in vertex])