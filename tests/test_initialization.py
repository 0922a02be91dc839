import math
from datetime import datetime, timezone

import pytest

from orbitprop.constants import DEG2RAD, RAD2DEG, TWOPI, XPDOTP
from orbitprop.conversions import Coordinates, eci_to_look_angles, jday_time
from orbitprop.gravity import get_grav_const
from orbitprop.initialization import initl, sgp4init, tle_to_sat
from orbitprop.propagator import propagate
from orbitprop.satellite import Satellite
from orbitprop.tle import TLEParseError

LINE1_00005 = "1 00005U 58002B   00179.78495062  .00000023  00000-0  28098-4 0  4753"
LINE2_00005 = "2 00005  34.2682 348.7242 1859667 331.7664  19.3264 10.82419157413667"

ISS_LINE1 = "1 25544U 98067A   20140.34419374 -.00000374  00000-0  13653-5 0  9990"
ISS_LINE2 = "2 25544  51.6433 131.2277 0001338 330.3524 173.1622 15.49372617227549"


def test_iss_look_angles():
    sat = tle_to_sat(ISS_LINE1, ISS_LINE2, "wgs72")
    when = datetime(2020, 5, 23, 20, 23, 37, tzinfo=timezone.utc)
    pos, _ = propagate(sat, when)
    observer = Coordinates(latitude=55.6167 * DEG2RAD,
                           longitude=12.6500 * DEG2RAD,
                           altitude=0.005)
    angles = eci_to_look_angles(pos, observer, jday_time(when), sat.gravity_const)
    assert abs(angles.azimuth * RAD2DEG - 181.2902281625632) < 1e-4
    assert abs(angles.elevation * RAD2DEG - 42.06164214709452) < 1e-4


def test_tle_to_sat_epoch_julian_date():
    sat = tle_to_sat(LINE1_00005, LINE2_00005, "wgs72")
    assert sat.jdsatepoch == pytest.approx(2451723.28495062, abs=1e-6)
    assert sat.tle.catalog_number == "00005"
    assert sat.init == "n"
    assert sat.t == 0.0


@pytest.mark.parametrize(
    "line1, line2, method, irez",
    [
        ("1 06251U 62025E   06176.82412014  .00008885  00000-0  12808-3 0  3985",
         "2 06251  58.0579  54.0425 0030035 139.1568 221.1854 15.56387291  6774",
         "n", 0),
        ("1 24208U 96044A   06177.04061740 -.00000094  00000-0  10000-3 0  1600",
         "2 24208   3.8536  80.0121 0026640 311.0977  48.3000  1.00778054 36119",
         "d", 1),
        ("1 23599U 95029B   06171.76535463  .00085586  12891-6  12956-2 0  2905",
         "2 23599   6.9327   0.2849 5782022 274.4436  25.2425  4.47796565123555",
         "d", 0),
    ],
)
def test_tle_to_sat_chooses_method(line1, line2, method, irez):
    sat = tle_to_sat(line1, line2, "wgs72")
    assert sat.method == method
    assert sat.irez == irez


def test_tle_to_sat_unknown_gravity():
    with pytest.raises(ValueError):
        tle_to_sat(LINE1_00005, LINE2_00005, "wgs99")


def test_tle_to_sat_malformed_line():
    with pytest.raises(TLEParseError):
        tle_to_sat(LINE1_00005[:40], LINE2_00005, "wgs72")


def test_sgp4init_returns_epoch_state():
    sat = Satellite(
        gravity_const=get_grav_const("wgs72"),
        bstar=0.28098e-4,
        inclo=34.2682 * DEG2RAD,
        nodeo=348.7242 * DEG2RAD,
        ecco=0.1859667,
        argpo=331.7664 * DEG2RAD,
        mo=19.3264 * DEG2RAD,
        no=10.82419157 / XPDOTP,
    )
    pos, vel = sgp4init(2451723.28495062 - 2433281.5, sat)
    assert abs(pos.x - 7022.46529266) < 1e-4
    assert abs(pos.y - -1400.08296755) < 1e-4
    assert abs(pos.z - 0.03995155) < 1e-4
    assert abs(vel.x - 1.893841015) < 1e-4
    assert abs(vel.y - 6.405893759) < 1e-4
    assert abs(vel.z - 4.534807250) < 1e-4
    assert sat.init == "n"
    assert sat.method == "n"


def test_initl_equatorial_orbit():
    grav = get_grav_const("wgs72")
    no_in = 15.0 / XPDOTP
    result = initl(grav, 0.01, 20000.0, 0.0, no_in, "i")
    assert result.con41 == pytest.approx(2.0)
    assert result.con42 == pytest.approx(-4.0)
    assert result.no < no_in
    assert result.omeosq + result.eccsq == pytest.approx(1.0)
    assert 0.0 <= result.gsto < TWOPI


def test_initl_polar_orbit_constants():
    grav = get_grav_const("wgs72")
    result = initl(grav, 0.0, 20000.0, math.pi / 2, 15.0 / XPDOTP, "i")
    assert result.con41 == pytest.approx(-1.0)
    assert result.con42 == pytest.approx(1.0)
    assert result.sinio == pytest.approx(1.0)


def test_initl_sidereal_time_modes_agree():
    grav = get_grav_const("wgs72")
    afspc = initl(grav, 0.01, 20000.3, 0.5, 15.0 / XPDOTP, "a")
    iau = initl(grav, 0.01, 20000.3, 0.5, 15.0 / XPDOTP, "i")
    assert 0.0 <= afspc.gsto < TWOPI
    difference = abs(afspc.gsto - iau.gsto)
    assert min(difference, TWOPI - difference) < 1e-5