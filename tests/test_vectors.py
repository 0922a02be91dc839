import pytest

from orbitprop.vectors import Vector3, close_float


@pytest.mark.parametrize(
    "a, b, expected",
    [(1.0, 1.00005, True), (1.0, 1.001, False), (-3.0, -3.0, True)],
)
def test_close_float(a, b, expected):
    assert close_float(a, b) is expected
    assert close_float(b, a) is expected


def test_equals_within_tolerance():
    assert Vector3(1.0, 2.0, 3.0).equals(Vector3(1.00001, 2.0, 3.0))


def test_equals_detects_difference_in_any_component():
    base = Vector3(1.0, 2.0, 3.0)
    assert not base.equals(Vector3(1.1, 2.0, 3.0))
    assert not base.equals(Vector3(1.0, 2.1, 3.0))
    assert not base.equals(Vector3(1.0, 2.0, 3.1))


def test_default_is_origin():
    assert Vector3().equals(Vector3(0.0, 0.0, 0.0))