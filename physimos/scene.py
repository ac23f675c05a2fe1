"""The world scene: its objects, camera and per-frame physics."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from physimos.camera import Camera
from physimos.input import InputState
from physimos.simulation import BounceSimulation
from physimos.timing import FrameClock
from physimos.vecmath import Vec3
from physimos.world import WorldObject, model_matrix

PHYSICS_DT = 0.0133
GRAVITY = -9.8
RIGID_BOUNCE_DAMPING = 0.5

# Objects that spin by a fixed amount each physics step.
FIXED_SPIN: dict[str, tuple[float, float, float]] = {
    "worldCube_spin": (0.03, 0.01, 0.0),
}
# Objects that spin by their own angular velocity each physics step.
ANGULAR_SPIN_NAMES: frozenset[str] = frozenset({"cube_3_gravity", "transform_1"})


def transform_point(
    point: Sequence[float], matrix: Sequence[float]
) -> tuple[float, float, float]:
    """Apply a row-major 4x4 matrix to a point with w = 1, dropping w."""
    if len(matrix) != 16:
        raise ValueError(f"matrix must have 16 elements, got {len(matrix)}")
    x, y, z = point
    return tuple(  # type: ignore[return-value]
        matrix[row * 4] * x
        + matrix[row * 4 + 1] * y
        + matrix[row * 4 + 2] * z
        + matrix[row * 4 + 3]
        for row in range(3)
    )


def colliding_with_ground(ground: WorldObject, obj: WorldObject) -> bool:
    """Axis-aligned test of an object's box against the ground's box.

    The ground's bounding box is taken in world coordinates; the object's is
    relative to its position.
    """
    box = obj.bounding_box
    gbox = ground.bounding_box
    pos = obj.transform.position

    if not pos.z + box.z_min < gbox.z_max:
        return False
    if not (gbox.x_min < pos.x + box.x_min < gbox.x_max):
        return False
    return pos.y + box.y_min < gbox.y_max and pos.y + box.y_max > gbox.y_min


class WorldScene:
    """Holds the world's objects and steps them each frame."""

    def __init__(self, ground: WorldObject) -> None:
        self.ground = ground
        self.objects: list[WorldObject] = [ground]
        self.camera = Camera()
        self.input_state = InputState()
        self.clock = FrameClock()
        self.simulation: Optional[BounceSimulation] = None

    def __iter__(self) -> Iterator[WorldObject]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def add(self, obj: WorldObject) -> WorldObject:
        """Add an object to the scene and return it."""
        self.objects.append(obj)
        return obj

    def reset_objects(self) -> None:
        """Return every rigid-body object to its initial state."""
        for obj in self.objects:
            if obj.has_rigid_body:
                t = obj.transform
                t.position = t.position_0.copy()
                t.velocity = t.velocity_0.copy()
                t.rotation = t.rotation_0.copy()
                t.angular_velocity = t.angular_velocity_0.copy()

    def _apply_gravity(self, obj: WorldObject) -> None:
        t = obj.transform
        t.velocity.z += GRAVITY * PHYSICS_DT
        t.position.z += t.velocity.z * PHYSICS_DT

        # The collision check needs the matrix after the move.
        obj.model_matrix = model_matrix(t)

        if not obj.has_rigid_body:
            return
        for vertex in obj.rigid_body.iter_vertices():
            if transform_point(vertex, obj.model_matrix)[2] < 0.0:
                t.position.z -= t.velocity.z * PHYSICS_DT
                t.velocity.z = -t.velocity.z * RIGID_BOUNCE_DAMPING
                t.angular_velocity = -t.angular_velocity
                break

    def physics_step(self) -> None:
        """Apply gravity, ground bounces, spins and horizontal velocity."""
        for obj in self.objects:
            if obj.gravity_on:
                self._apply_gravity(obj)

            t = obj.transform
            spin = FIXED_SPIN.get(obj.name)
            if spin is not None:
                t.rotate(spin)
            if obj.name in ANGULAR_SPIN_NAMES:
                t.rotate(tuple(t.angular_velocity))

            t.position.x += t.velocity.x * PHYSICS_DT
            t.position.y += t.velocity.y * PHYSICS_DT

    def update(self) -> None:
        """Run one frame: simulation, physics, camera and object matrices."""
        if self.simulation is not None:
            self.simulation.update(self.input_state)

        if not self.clock.is_paused:
            self.physics_step()

        self.camera.apply_input(self.input_state)

        for obj in self.objects:
            if obj.is_active:
                obj.update()