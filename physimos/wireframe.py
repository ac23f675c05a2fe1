"""Model vertex layouts and wireframe generation from triangle lists."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Sequence

Vertex = tuple[float, float, float]
VertexPair = tuple[Vertex, Vertex]


class ModelFileType(enum.Enum):
    """File formats a model can be loaded from."""

    OBJ = "obj"
    PSO = "pso"


class VertexStructure(enum.Enum):
    """Interleaved vertex layouts; every layout starts with x, y, z."""

    P3 = "p3"
    P3C3 = "p3c3"
    P3C3T2 = "p3c3t2"
    P3N3T2 = "p3n3t2"

    @property
    def stride(self) -> int:
        """Number of floats making up one vertex."""
        return _STRIDES[self]


_STRIDES = {
    VertexStructure.P3: 3,
    VertexStructure.P3C3: 6,
    VertexStructure.P3C3T2: 8,
    VertexStructure.P3N3T2: 8,
}


@dataclass
class Wireframe:
    """Line-list geometry derived from a triangulated model.

    ``data`` holds the de-duplicated edges, six floats per line.
    ``vertex_count`` counts two vertices for each of the three edges of every
    triangle, before duplicates are removed.
    """

    data: list[float] = field(default_factory=list)
    vertex_count: int = 0

    @property
    def lines(self) -> Iterator[VertexPair]:
        """Yield each stored line as a pair of (x, y, z) vertices."""
        for start in range(0, len(self.data), 6):
            x1, y1, z1, x2, y2, z2 = self.data[start:start + 6]
            yield ((x1, y1, z1), (x2, y2, z2))

    def __len__(self) -> int:
        return len(self.data) // 6


def pairs_equivalent(pair1: VertexPair, pair2: VertexPair) -> bool:
    """Return True when both pairs join the same two points, in either order."""
    a1, a2 = tuple(pair1[0]), tuple(pair1[1])
    b1, b2 = tuple(pair2[0]), tuple(pair2[1])
    return (a1 == b1 and a2 == b2) or (a1 == b2 and a2 == b1)


def _triangle_edges(
    vertices: Sequence[float], vertex_count: int, stride: int
) -> Iterator[VertexPair]:
    for start in range(0, vertex_count * stride, stride * 3):
        v0, v1, v2 = (
            (
                vertices[start + n * stride],
                vertices[start + n * stride + 1],
                vertices[start + n * stride + 2],
            )
            for n in range(3)
        )
        yield (v2, v1)
        yield (v1, v0)
        yield (v0, v2)


def generate_wireframe(
    vertices: Sequence[float], vertex_count: int, structure: VertexStructure
) -> Wireframe:
    """Build a wireframe connecting the corners of every triangle.

    An edge shared by several triangles is stored only once.
    """
    if not isinstance(structure, VertexStructure):
        raise ValueError(f"unknown vertex structure: {structure!r}")
    if vertex_count < 0 or vertex_count % 3:
        raise ValueError(f"vertex count {vertex_count} is not a whole number of triangles")
    stride = structure.stride
    if vertex_count * stride > len(vertices):
        raise ValueError(
            f"{vertex_count} vertices of stride {stride} need "
            f"{vertex_count * stride} values, got {len(vertices)}"
        )

    wireframe = Wireframe(vertex_count=(vertex_count // 3) * 6)
    seen: list[VertexPair] = []
    for pair in _triangle_edges(vertices, vertex_count, stride):
        if any(pairs_equivalent(cached, pair) for cached in seen):
            continue
        seen.append(pair)
        wireframe.data.extend(pair[0])
        wireframe.data.extend(pair[1])
    return wireframe