import pytest

from physimos.vecmath import (
    EulerAnglesRad,
    Vec3,
    add_v3,
    are_equal_v3,
    cross_v3,
    div_v3,
    dot_v3,
    format_v3,
    sub_v3,
)

A1 = (1.0, 2.0, 3.0)
A2 = (1.0, 2.0, 3.0)
AN = (-1.0, -2.0, -3.0)
B1 = (4.0, 5.0, 6.0)
B2 = (4.0, 5.0, 6.0)
C = (4554.033, 22.0, -12323.02222)
Z = (0.0, 0.0, 0.0)


def test_are_equal():
    assert are_equal_v3(A1, A2)
    assert are_equal_v3(B1, B2)
    assert not are_equal_v3(A1, B1)
    assert not are_equal_v3(A2, B2)


@pytest.mark.parametrize(
    "other, expected",
    [
        (A2, (2.0, 4.0, 6.0)),
        (AN, (0.0, 0.0, 0.0)),
        (Z, (1.0, 2.0, 3.0)),
    ],
)
def test_add(other, expected):
    assert are_equal_v3(add_v3(A1, other), expected)


def test_add_large_values():
    assert add_v3(A1, C) == pytest.approx((4555.033, 24.0, -12320.02222))


@pytest.mark.parametrize(
    "other, expected",
    [
        (A1, (0.0, 0.0, 0.0)),
        (AN, (2.0, 4.0, 6.0)),
    ],
)
def test_sub(other, expected):
    assert are_equal_v3(sub_v3(A1, other), expected)


def test_dot():
    assert dot_v3(A1, A1) == 14.0
    assert dot_v3(A1, AN) == -14.0
    assert dot_v3(A1, A1) != 14.00000001


def test_cross():
    assert are_equal_v3(cross_v3(A1, B1), (-3.0, 6.0, -3.0))
    assert cross_v3(C, B1) == pytest.approx((61747.1111, -76616.28688, 22682.165))


def test_cross_is_orthogonal():
    result = cross_v3(A1, B1)
    assert dot_v3(result, A1) == 0.0
    assert dot_v3(result, B1) == 0.0


def test_div():
    assert are_equal_v3(div_v3(A1, A1), (1.0, 1.0, 1.0))
    assert are_equal_v3(div_v3(B1, A1), (4.0, 2.5, 2.0))
    assert not are_equal_v3(div_v3(A1, A1), (1.0, 1.0, 1.000001))


def test_inputs_not_mutated():
    a = [1.0, 2.0, 3.0]
    add_v3(a, B1)
    sub_v3(a, B1)
    div_v3(a, B1)
    assert a == [1.0, 2.0, 3.0]


def test_vec3_operators_match_functions():
    v = Vec3(*A1)
    assert are_equal_v3(v + B1, add_v3(A1, B1))
    assert are_equal_v3(v - B1, sub_v3(A1, B1))
    assert are_equal_v3(-v, AN)
    assert are_equal_v3(v * 2.0, add_v3(A1, A1))


def test_vec3_copy_is_independent():
    v = Vec3(*A1)
    w = v.copy()
    w.x = 10.0
    assert v.x == 1.0


def test_euler_angles_iterate_in_order():
    assert tuple(EulerAnglesRad(1.0, 2.0, 3.0)) == A1


def test_format_v3():
    text = format_v3(A1)
    assert "print_v3 :" in text
    assert "[0] = 1" in text.splitlines()
    assert "[2] = 3" in text.splitlines()