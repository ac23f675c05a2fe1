"""First-person camera holding the view and perspective matrices."""

from __future__ import annotations

import math
from typing import Any, Sequence

from physimos.vecmath import EulerAnglesRad, Vec3

SCREEN_INIT_WIDTH = 1400
SCREEN_INIT_HEIGHT = 800

Z_FAR = 300.0
Z_NEAR = 1.0

INITIAL_ROTATION_RAD: tuple[float, float, float] = (0.0, -0.3, 0.0)
INITIAL_POSITION: tuple[float, float, float] = (-25.0, 0.0, 2.0)

MOVE_STEP = 0.2
ROTATE_STEP = 0.05
MOUSE_SENSITIVITY = 0.005

# Row-major perspective projection.
PERSPECTIVE_MATRIX: tuple[float, ...] = (
    Z_NEAR / 1.0, 0.0, 0.0, 0.0,
    0.0, Z_NEAR / 1.0, 0.0, 0.0,
    0.0, 0.0, -(Z_FAR + Z_NEAR) / (Z_FAR - Z_NEAR), -2 * Z_NEAR * Z_FAR / (Z_FAR - Z_NEAR),
    0.0, 0.0, -1.0, 0.0,
)

IDENTITY: tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def multiply_matrices(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Return the row-major 4x4 product left x right."""
    if len(left) != 16 or len(right) != 16:
        raise ValueError("both matrices must have 16 elements")
    return [
        sum(left[row * 4 + k] * right[k * 4 + col] for k in range(4))
        for row in range(4)
        for col in range(4)
    ]


def _rotation_x(a: float) -> list[float]:
    c, s = math.cos(a), math.sin(a)
    return [
        1.0, 0.0, 0.0, 0.0,
        0.0, c, s, 0.0,
        0.0, -s, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


def _rotation_y(b: float) -> list[float]:
    c, s = math.cos(b), math.sin(b)
    return [
        c, 0.0, s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        -s, 0.0, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


def _rotation_z(c_angle: float) -> list[float]:
    c, s = math.cos(c_angle), math.sin(c_angle)
    return [
        c, s, 0.0, 0.0,
        -s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


class Camera:
    """Camera with Euler-angle orientation, a position and its matrices."""

    def __init__(self, width: int = SCREEN_INIT_WIDTH, height: int = SCREEN_INIT_HEIGHT) -> None:
        self.euler_angles = EulerAnglesRad(*INITIAL_ROTATION_RAD)
        self.position = Vec3(*INITIAL_POSITION)
        self.view_matrix: list[float] = [0.0] * 16
        self.perspective_matrix: list[float] = list(PERSPECTIVE_MATRIX)
        self.set_perspective(width, height)

    def set_perspective(self, width: int, height: int) -> None:
        """Match the near clipping plane to the window's aspect ratio."""
        if width <= 0 or height <= 0:
            raise ValueError(f"window dimensions must be positive, got {width}x{height}")
        self.perspective_matrix[0] = Z_NEAR / 1.0
        self.perspective_matrix[5] = Z_NEAR / (float(height) / float(width))

    def set_euler_angles(self, a: float, b: float, c: float) -> None:
        self.euler_angles = EulerAnglesRad(a, b, c)

    def rotate(self, a: float, b: float, c: float) -> None:
        self.euler_angles.a += a
        self.euler_angles.b += b
        self.euler_angles.c += c

    def set_position(self, x: float, y: float, z: float) -> None:
        self.position = Vec3(x, y, z)

    def translate(self, x: float, y: float, z: float) -> None:
        self.position.x += x
        self.position.y += y
        self.position.z += z

    def update_view_matrix(self) -> list[float]:
        """Rebuild the view matrix as X x Y x Z x T and return it."""
        translation = list(IDENTITY)
        translation[3] = -self.position.x
        translation[7] = -self.position.y
        translation[11] = -self.position.z

        view = translation
        for rotation in (
            _rotation_z(self.euler_angles.c),
            _rotation_y(self.euler_angles.b),
            _rotation_x(self.euler_angles.a),
        ):
            view = multiply_matrices(rotation, view)
        self.view_matrix = view
        return view

    def apply_input(self, input_state: Any) -> None:
        """Move and turn according to the held keys and mouse, then refresh the view."""
        forward_x = math.cos(self.euler_angles.c)
        forward_y = math.sin(self.euler_angles.c)
        step = MOVE_STEP

        if input_state.w:
            self.translate(forward_x * step, forward_y * step, 0.0)
        if input_state.s:
            self.translate(-forward_x * step, -forward_y * step, 0.0)

        both_strafe = input_state.a and input_state.d
        if input_state.a:
            self.translate(-forward_y * step, forward_x * step, 0.0)
        if both_strafe and input_state.most_recent_ad_press == "a":
            self.translate(-forward_y * step, forward_x * step, 0.0)
        if input_state.d:
            self.translate(forward_y * step, -forward_x * step, 0.0)
        if both_strafe and input_state.most_recent_ad_press == "d":
            self.translate(forward_y * step, -forward_x * step, 0.0)

        if input_state.arrow_up:
            self.rotate(0.0, ROTATE_STEP, 0.0)
        if input_state.arrow_down:
            self.rotate(0.0, -ROTATE_STEP, 0.0)
        if input_state.arrow_left:
            self.rotate(0.0, 0.0, ROTATE_STEP)
        if input_state.arrow_right:
            self.rotate(0.0, 0.0, -ROTATE_STEP)

        if input_state.middle_mouse:
            dx = float(input_state.pointer_x - input_state.pointer_x_last_frame)
            dy = float(input_state.pointer_y - input_state.pointer_y_last_frame)
            input_state.pointer_x_last_frame = input_state.pointer_x
            input_state.pointer_y_last_frame = input_state.pointer_y
            self.rotate(0.0, 0.0, -dx * MOUSE_SENSITIVITY)
            self.rotate(0.0, -dy * MOUSE_SENSITIVITY, 0.0)

        self.update_view_matrix()