import pytest

from orbitprop.constants import EQUATOR_RADIUS
from orbitprop.gravity import Gravity, get_grav_const


def test_wgs72old_uses_fixed_xke():
    grav = get_grav_const(Gravity.WGS72OLD)
    assert grav.xke == 0.0743669161
    assert grav.radiusearthkm == 6378.135


def test_wgs84_uses_equator_radius():
    grav = get_grav_const(Gravity.WGS84)
    assert grav.radiusearthkm == EQUATOR_RADIUS
    assert grav.flattening == pytest.approx(1 / 298.257223563)


@pytest.mark.parametrize("model", list(Gravity))
def test_derived_values_are_consistent(model):
    grav = get_grav_const(model)
    assert grav.tumin * grav.xke == pytest.approx(1.0)
    assert grav.j3oj2 == pytest.approx(grav.j3 / grav.j2)


def test_string_names_are_accepted():
    assert get_grav_const("wgs72") == get_grav_const(Gravity.WGS72)


def test_wgs72_xke_close_to_old_model():
    new = get_grav_const(Gravity.WGS72)
    old = get_grav_const(Gravity.WGS72OLD)
    assert new.xke == pytest.approx(old.xke, rel=1e-6)


def test_unknown_model_raises():
    with pytest.raises(ValueError, match="not a valid gravity model"):
        get_grav_const("mars")