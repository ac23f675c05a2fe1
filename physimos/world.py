"""World objects: transforms, model matrices and shader selection."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from physimos.shapes import RigidBody
from physimos.vecmath import Vec3
from physimos.wireframe import ModelFileType, VertexStructure

# Fixed axis remap applied after the model and view transforms.
SANITY_MATRIX: tuple[float, ...] = (
    0.0, -1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    -1.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class ShaderKind(enum.IntEnum):
    """Shader programs an object can be drawn with."""

    UI = 0
    UI_PRIMITIVE = 1
    WORLD = 2
    WORLD_OBJ = 3
    WORLD_WIREFRAME = 4


_SHADER_BY_STRUCTURE = {
    VertexStructure.P3N3T2: ShaderKind.WORLD_OBJ,
    VertexStructure.P3C3: ShaderKind.WORLD,
    VertexStructure.P3C3T2: ShaderKind.WORLD,
    VertexStructure.P3: ShaderKind.WORLD_WIREFRAME,
}


def shader_for_structure(structure: VertexStructure) -> ShaderKind:
    """Return the shader that draws models of the given vertex layout."""
    try:
        return _SHADER_BY_STRUCTURE[structure]
    except (KeyError, TypeError):
        raise ValueError(f"no shader for vertex structure {structure!r}") from None


def _vec(values: Sequence[float]) -> Vec3:
    x, y, z = values
    return Vec3(x, y, z)


@dataclass
class Transform:
    """Position, orientation, scale and motion state of an object."""

    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    position_0: Vec3 = field(default_factory=Vec3)
    position: Vec3 = field(default_factory=Vec3)
    translation_prev_step: Vec3 = field(default_factory=Vec3)
    velocity_0: Vec3 = field(default_factory=Vec3)
    velocity_prev_step: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    rotation_0: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)
    angular_velocity_0: Vec3 = field(default_factory=Vec3)
    angular_velocity: Vec3 = field(default_factory=Vec3)

    def rotate(self, delta: Sequence[float]) -> None:
        """Add delta to the rotation angles."""
        self.rotation = self.rotation + _vec(delta)

    def translate(self, delta: Sequence[float]) -> None:
        """Add delta to the position."""
        self.position = self.position + _vec(delta)


@dataclass
class BoundingBox:
    """Axis-aligned extents relative to an object's position."""

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0
    z_min: float = 0.0
    z_max: float = 0.0


def model_matrix(
    transform: Transform, parent_transform: Optional[Transform] = None
) -> list[float]:
    """Build the row-major model matrix of a transform.

    With a parent, the parent's position and rotation are added to the
    object's own; the scale stays the object's own.
    """
    position = transform.position
    rotation = transform.rotation
    if parent_transform is not None:
        position = position + parent_transform.position
        rotation = rotation + parent_transform.rotation

    sx, sy, sz = transform.scale
    tx, ty, tz = position

    c_ph, s_ph = math.cos(rotation.x), math.sin(rotation.x)
    c_th, s_th = math.cos(rotation.y), math.sin(rotation.y)
    c_ps, s_ps = math.cos(rotation.z), math.sin(rotation.z)

    a11 = c_ps * c_ph - s_ps * c_th * s_ph
    a12 = -c_ps * s_ph - s_ps * c_th * c_ph
    a13 = s_ps * s_th
    a21 = s_ps * c_ph + c_ps * c_th * s_ph
    a22 = -s_ps * s_ph + c_ps * c_th * c_ph
    a23 = -c_ps * s_th
    a31 = s_th * s_ph
    a32 = s_th * c_ph
    a33 = c_th

    return [
        sx * a11, sy * a12, sz * a13, tx,
        sx * a21, sy * a22, sz * a23, ty,
        sx * a31, sy * a32, sz * a33, tz,
        0.0, 0.0, 0.0, 1.0,
    ]


def format_matrix(matrix: Sequence[float]) -> str:
    """Render a 16-element row-major matrix as four lines of four values."""
    if len(matrix) != 16:
        raise ValueError(f"matrix must have 16 elements, got {len(matrix)}")
    return "\n".join(
        " ".join(f"{value:g}" for value in matrix[row * 4:row * 4 + 4])
        for row in range(4)
    )


class WorldObject:
    """A named object in the world with a transform and optional children."""

    def __init__(
        self,
        name: str,
        model_file_type: ModelFileType,
        vertex_structure: VertexStructure,
    ) -> None:
        if not isinstance(model_file_type, ModelFileType):
            raise ValueError(f"unknown model file type: {model_file_type!r}")
        self.name = name
        self.model_file_type = model_file_type
        self.vertex_structure = vertex_structure
        self.shader_kind = shader_for_structure(vertex_structure)
        self.transform = Transform()
        self.is_active = True
        self.parent: Optional[WorldObject] = None
        self.children: list[WorldObject] = []
        self.model_matrix: list[float] = [0.0] * 16

        self.rigid_body = RigidBody()
        self.has_rigid_body = False
        self.gravity_on = False
        self.offset_to_bottom = 0.0
        self.bounding_box = BoundingBox()

    def __repr__(self) -> str:
        return f"WorldObject(name={self.name!r}, shader={self.shader_kind.name})"

    def update(self) -> None:
        """Recompute this object's model matrix, then those of its children."""
        parent_transform = self.parent.transform if self.parent is not None else None
        self.model_matrix = model_matrix(self.transform, parent_transform)
        for child in self.children:
            child.update()

    def toggle_wireframe(self) -> None:
        """Switch between the wireframe shader and the model's regular shader."""
        if self.shader_kind in (ShaderKind.WORLD, ShaderKind.WORLD_OBJ):
            self.shader_kind = ShaderKind.WORLD_WIREFRAME
        elif self.shader_kind is ShaderKind.WORLD_WIREFRAME:
            if self.model_file_type is ModelFileType.OBJ:
                self.shader_kind = ShaderKind.WORLD_OBJ
            elif self.model_file_type is ModelFileType.PSO:
                self.shader_kind = ShaderKind.WORLD

    def add_child(self, child: WorldObject) -> None:
        """Attach child to this object."""
        node: Optional[WorldObject] = self
        while node is not None:
            if node is child:
                raise ValueError(f"attaching {child.name!r} would create a cycle")
            node = node.parent
        child.parent = self
        self.children.append(child)

    def walk(self) -> Iterator[WorldObject]:
        """Yield this object and all of its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()