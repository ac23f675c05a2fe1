import math

import pytest

from physimos.camera import (
    IDENTITY,
    INITIAL_POSITION,
    INITIAL_ROTATION_RAD,
    PERSPECTIVE_MATRIX,
    Camera,
    multiply_matrices,
)
from physimos.input import InputState


def _apply(matrix, point):
    x, y, z = point
    vec = (x, y, z, 1.0)
    return [sum(matrix[r * 4 + k] * vec[k] for k in range(4)) for r in range(4)]


def test_initial_pose_matches_defaults():
    cam = Camera()
    assert tuple(cam.position) == INITIAL_POSITION
    assert tuple(cam.euler_angles) == INITIAL_ROTATION_RAD


def test_perspective_aspect_invariant():
    cam = Camera(1400, 800)
    assert cam.perspective_matrix[5] * 800 / 1400 == pytest.approx(1.0)
    assert cam.perspective_matrix[0] == PERSPECTIVE_MATRIX[0]
    assert cam.perspective_matrix[10] == PERSPECTIVE_MATRIX[10]
    assert cam.perspective_matrix[11] == PERSPECTIVE_MATRIX[11]


def test_set_perspective_rejects_zero_height():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.set_perspective(100, 0)


def test_multiply_by_identity_is_noop():
    m = [float(i) for i in range(16)]
    assert multiply_matrices(IDENTITY, m) == m
    assert multiply_matrices(m, IDENTITY) == m


def test_multiply_rejects_bad_size():
    with pytest.raises(ValueError):
        multiply_matrices([1.0] * 9, IDENTITY)


def test_view_matrix_without_rotation_is_translation():
    cam = Camera()
    cam.set_euler_angles(0.0, 0.0, 0.0)
    cam.set_position(1.0, 2.0, 3.0)
    view = cam.update_view_matrix()
    assert view[3] == -1.0
    assert view[7] == -2.0
    assert view[11] == -3.0
    assert [view[i] for i in (0, 5, 10, 15)] == [1.0, 1.0, 1.0, 1.0]


def test_view_maps_camera_position_to_origin():
    cam = Camera()
    cam.set_euler_angles(0.4, -0.7, 1.3)
    cam.set_position(5.0, -2.0, 7.5)
    view = cam.update_view_matrix()
    result = _apply(view, tuple(cam.position))
    assert result == pytest.approx([0.0, 0.0, 0.0, 1.0], abs=1e-9)


def test_view_rotation_is_orthonormal():
    cam = Camera()
    cam.set_euler_angles(0.3, 0.9, -2.1)
    view = cam.update_view_matrix()
    rows = [view[r * 4:r * 4 + 3] for r in range(3)]
    for i, row in enumerate(rows):
        for j, other in enumerate(rows):
            dot = sum(p * q for p, q in zip(row, other))
            assert dot == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)


def test_rotate_and_translate_accumulate():
    cam = Camera()
    cam.set_euler_angles(0.0, 0.0, 0.0)
    cam.set_position(0.0, 0.0, 0.0)
    cam.rotate(0.1, 0.2, 0.3)
    cam.rotate(0.1, 0.2, 0.3)
    cam.translate(1.0, -1.0, 2.0)
    assert tuple(cam.euler_angles) == pytest.approx((0.2, 0.4, 0.6))
    assert tuple(cam.position) == (1.0, -1.0, 2.0)


def test_forward_key_moves_along_heading():
    cam = Camera()
    cam.set_euler_angles(0.0, 0.0, 0.0)
    cam.set_position(0.0, 0.0, 0.0)
    state = InputState(w=True)
    cam.apply_input(state)
    assert tuple(cam.position) == pytest.approx((0.2, 0.0, 0.0))


def test_forward_then_back_returns_home():
    cam = Camera()
    cam.set_euler_angles(0.0, 0.0, 0.8)
    cam.set_position(1.0, 1.0, 1.0)
    cam.apply_input(InputState(w=True))
    cam.apply_input(InputState(s=True))
    assert tuple(cam.position) == pytest.approx((1.0, 1.0, 1.0))


def test_both_strafe_keys_favour_most_recent():
    cam = Camera()
    cam.set_euler_angles(0.0, 0.0, 0.0)
    cam.set_position(0.0, 0.0, 0.0)
    cam.apply_input(InputState(a=True, d=True, most_recent_ad_press="a"))
    assert cam.position.y == pytest.approx(0.2)
    cam.set_position(0.0, 0.0, 0.0)
    cam.apply_input(InputState(a=True, d=True, most_recent_ad_press="d"))
    assert cam.position.y == pytest.approx(-0.2)


def test_arrow_keys_turn_camera():
    cam = Camera()
    cam.set_euler_angles(0.0, 0.0, 0.0)
    cam.apply_input(InputState(arrow_up=True, arrow_left=True))
    assert cam.euler_angles.b == pytest.approx(0.05)
    assert cam.euler_angles.c == pytest.approx(0.05)
    cam.apply_input(InputState(arrow_down=True, arrow_right=True))
    assert tuple(cam.euler_angles) == pytest.approx((0.0, 0.0, 0.0))


def test_middle_mouse_drag_turns_and_consumes_delta():
    cam = Camera()
    cam.set_euler_angles(0.0, 0.0, 0.0)
    state = InputState(middle_mouse=True, pointer_x=110, pointer_y=100,
                       pointer_x_last_frame=100, pointer_y_last_frame=100)
    cam.apply_input(state)
    assert cam.euler_angles.c < 0.0
    assert cam.euler_angles.b == 0.0
    assert state.pointer_x_last_frame == 110
    before = cam.euler_angles.c
    cam.apply_input(state)
    assert cam.euler_angles.c == before


def test_apply_input_refreshes_view():
    cam = Camera()
    cam.apply_input(InputState())
    expected = Camera()
    expected.update_view_matrix()
    assert cam.view_matrix == pytest.approx(expected.view_matrix)
    assert not math.isnan(cam.view_matrix[0])