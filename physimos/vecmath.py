"""Small three-component vector helpers and value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

Vector = Sequence[float]


@dataclass
class Vec3:
    """A mutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector) -> Vec3:
        return Vec3(*add_v3(self, other))

    def __sub__(self, other: Vector) -> Vec3:
        return Vec3(*sub_v3(self, other))

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def copy(self) -> Vec3:
        """Return an independent copy of this vector."""
        return Vec3(self.x, self.y, self.z)


@dataclass
class EulerAnglesRad:
    """Three Euler angles in radians."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.a
        yield self.b
        yield self.c


def _components(v: Vector) -> tuple[float, float, float]:
    x, y, z = v
    return x, y, z


def are_equal_v3(a: Vector, b: Vector) -> bool:
    """Return True when every component of a equals the one of b exactly."""
    return _components(a) == _components(b)


def add_v3(a: Vector, b: Vector) -> tuple[float, float, float]:
    """Element-wise sum a + b."""
    return tuple(p + q for p, q in zip(_components(a), _components(b)))  # type: ignore[return-value]


def sub_v3(a: Vector, b: Vector) -> tuple[float, float, float]:
    """Element-wise difference a - b."""
    return tuple(p - q for p, q in zip(_components(a), _components(b)))  # type: ignore[return-value]


def dot_v3(a: Vector, b: Vector) -> float:
    """Dot product of a and b."""
    ax, ay, az = _components(a)
    bx, by, bz = _components(b)
    return ax * bx + ay * by + az * bz


def cross_v3(a: Vector, b: Vector) -> tuple[float, float, float]:
    """Cross product a x b."""
    ax, ay, az = _components(a)
    bx, by, bz = _components(b)
    return (
        ay * bz - az * by,
        -ax * bz + az * bx,
        ax * by - ay * bx,
    )


def div_v3(a: Vector, b: Vector) -> tuple[float, float, float]:
    """Element-wise quotient a / b."""
    return tuple(p / q for p, q in zip(_components(a), _components(b)))  # type: ignore[return-value]


def format_v3(v: Vector) -> str:
    """Render a vector as a labelled block of text, one component per line."""
    rule = "_" * 21
    lines = [rule, "", "print_v3 :"]
    lines.extend(f"[{i}] = {value:g}" for i, value in enumerate(_components(v)))
    lines.append(rule)
    return "\n".join(lines)