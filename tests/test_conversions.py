import math
from datetime import datetime, timezone

import pytest

from orbitprop.constants import JULIAN_DAY_JAN_1_2000, TWOPI
from orbitprop.conversions import (
    Coordinates,
    InvalidLatitudeError,
    days2mdhms,
    eci_to_ecef,
    eci_to_lla,
    eci_to_look_angles,
    gstime,
    gstime_from_date,
    jday,
    jday_time,
    lat_long_deg,
    lla_to_eci,
    theta_g_jd,
)
from orbitprop.gravity import Gravity, get_grav_const
from orbitprop.vectors import Vector3

WGS84 = get_grav_const(Gravity.WGS84)
JD_2020 = jday(2020, 5, 23, 20, 23, 37.0)


def _angle_diff(a, b):
    return math.atan2(math.sin(a - b), math.cos(a - b))


def test_jday_of_j2000_epoch():
    assert jday(2000, 1, 1, 12, 0, 0.0) == JULIAN_DAY_JAN_1_2000


def test_jday_time_of_j2000_epoch_ignores_microseconds():
    assert jday_time(datetime(2000, 1, 1, 12)) == JULIAN_DAY_JAN_1_2000
    assert jday_time(datetime(2000, 1, 1, 12, 0, 0, 999999)) == JULIAN_DAY_JAN_1_2000


@pytest.mark.parametrize(
    "start, end",
    [
        (datetime(2020, 2, 28), datetime(2020, 3, 1)),
        (datetime(2021, 2, 28), datetime(2021, 3, 1)),
        (datetime(1999, 12, 31), datetime(2000, 1, 1)),
        (datetime(2006, 6, 25, 6), datetime(2006, 7, 4, 18)),
    ],
)
def test_jday_differences_match_calendar(start, end):
    expected_days = (end - start).total_seconds() / 86400.0
    assert jday_time(end) - jday_time(start) == pytest.approx(expected_days, abs=1e-9)


@pytest.mark.parametrize("year, epoch_days", [(2021, 100.25), (2020, 366.75), (2008, 264.51782528)])
def test_days2mdhms_round_trips_through_jday(year, epoch_days):
    month, day, hour, minute, second = days2mdhms(year, epoch_days)
    jd = jday(year, int(month), int(day), int(hour), int(minute), second)
    start = jday(year, 1, 1, 0, 0, 0.0)
    assert jd - start == pytest.approx(epoch_days - 1, abs=1e-7)


def test_days2mdhms_past_year_end_raises():
    with pytest.raises(ValueError):
        days2mdhms(2021, 400.0)


@pytest.mark.parametrize("jd", [2400000.5, JULIAN_DAY_JAN_1_2000, JD_2020, 2470000.25])
def test_gstime_is_normalised(jd):
    assert 0.0 <= gstime(jd) < TWOPI


def test_gstime_from_date_matches_gstime():
    date = datetime(2020, 5, 23, 20, 23, 37, tzinfo=timezone.utc)
    assert gstime_from_date(date) == gstime(jday_time(date))


def test_theta_g_jd_agrees_with_gstime():
    assert _angle_diff(theta_g_jd(JD_2020), gstime(JD_2020)) == pytest.approx(0.0, abs=1e-6)


def test_lat_long_deg_converts_latitude():
    rad = Coordinates(latitude=0.7, longitude=0.3, altitude=12.0)
    deg = lat_long_deg(rad)
    assert deg.latitude == pytest.approx(math.degrees(0.7))
    assert deg.longitude == pytest.approx(math.degrees(0.3))


@pytest.mark.parametrize("latitude", [2.0, -1.6])
def test_lat_long_deg_rejects_bad_latitude(latitude):
    with pytest.raises(InvalidLatitudeError):
        lat_long_deg(Coordinates(latitude=latitude, longitude=0.0))


@pytest.mark.parametrize("lat, lon, alt", [(0.9, 0.2, 0.5), (-0.4, 2.5, 400.0), (0.0, -1.0, 35786.0)])
def test_lla_eci_round_trip(lat, lon, alt):
    obs = Coordinates(latitude=lat, longitude=lon, altitude=alt)
    eci = lla_to_eci(obs, JD_2020, WGS84)
    _, lla = eci_to_lla(eci, theta_g_jd(JD_2020))
    assert lla.latitude == pytest.approx(lat, abs=1e-7)
    assert _angle_diff(lla.longitude, lon) == pytest.approx(0.0, abs=1e-9)
    assert lla.altitude == pytest.approx(alt, abs=1e-3)


def test_eci_to_lla_speed_falls_with_altitude():
    low, _ = eci_to_lla(Vector3(6800.0, 0.0, 0.0), 0.0)
    high, _ = eci_to_lla(Vector3(42000.0, 0.0, 0.0), 0.0)
    assert low > high > 0


def test_eci_to_ecef_preserves_norm_and_z():
    eci = Vector3(1234.5, -6789.0, 321.0)
    ecef = eci_to_ecef(eci, 1.1)
    assert math.hypot(ecef.x, ecef.y) == pytest.approx(math.hypot(eci.x, eci.y))
    assert ecef.z == eci.z
    assert eci_to_ecef(eci, 0.0).equals(eci)


def test_look_angles_satellite_to_the_north():
    obs = Coordinates(latitude=0.5, longitude=0.3, altitude=0.0)
    sat = lla_to_eci(Coordinates(latitude=0.51, longitude=0.3, altitude=500.0), JD_2020, WGS84)
    angles = eci_to_look_angles(sat, obs, JD_2020, WGS84)
    assert 0.0 <= angles.azimuth < TWOPI
    assert math.cos(angles.azimuth) == pytest.approx(1.0, abs=1e-3)
    assert 0.0 < angles.elevation < math.pi / 2
    assert angles.range > 500.0


def test_look_angles_satellite_to_the_east():
    obs = Coordinates(latitude=0.5, longitude=0.3, altitude=0.0)
    sat = lla_to_eci(Coordinates(latitude=0.5, longitude=0.31, altitude=500.0), JD_2020, WGS84)
    angles = eci_to_look_angles(sat, obs, JD_2020, WGS84)
    assert angles.azimuth == pytest.approx(math.pi / 2, abs=1e-2)
    assert angles.elevation > 0.0


def test_look_angles_below_horizon_on_far_side():
    obs = Coordinates(latitude=0.5, longitude=0.3, altitude=0.0)
    sat = lla_to_eci(Coordinates(latitude=-0.5, longitude=0.3 + math.pi, altitude=500.0), JD_2020, WGS84)
    angles = eci_to_look_angles(sat, obs, JD_2020, WGS84)
    assert angles.elevation < 0.0