"""Time and coordinate conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from orbitprop.constants import (
    DEG2RAD,
    EQUATOR_RADIUS,
    GRAVITY_EARTH,
    JULIAN_CENTURY,
    JULIAN_DAY_JAN_1_2000,
    POLAR_RADIUS,
    SECONDS_IN_DAY,
    TWOPI,
)
from orbitprop.gravity import GravConst
from orbitprop.vectors import Vector3

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_LEAP_MONTH_LENGTHS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class InvalidLatitudeError(ValueError):
    """Raised when a latitude lies outside -pi/2 .. +pi/2."""

    def __init__(self) -> None:
        super().__init__("latitude not within bounds -pi/2 to +pi/2")


@dataclass(frozen=True)
class Coordinates:
    """Latitude and longitude (degrees or radians) with altitude in km."""

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0


@dataclass(frozen=True)
class LookAngles:
    """Azimuth and elevation in radians with range in km."""

    azimuth: float
    elevation: float
    range: float


def days2mdhms(year: int, epoch_days: float) -> tuple[float, float, float, float, float]:
    """Split a day of the year into (month, day, hour, minute, second)."""
    lengths = _LEAP_MONTH_LENGTHS if year % 4 == 0 else _MONTH_LENGTHS
    day_of_year = math.floor(epoch_days)

    month = 1
    elapsed = 0
    for length in lengths:
        if day_of_year <= elapsed + length:
            break
        elapsed += length
        month += 1
    else:
        raise ValueError(f"day {epoch_days} lies beyond the end of year {year}")

    day = day_of_year - elapsed
    temp = (epoch_days - day_of_year) * 24.0
    hour = math.floor(temp)
    temp = (temp - hour) * 60.0
    minute = math.floor(temp)
    second = (temp - minute) * 60.0
    return float(month), float(day), float(hour), float(minute), second


def jday(year: int, month: int, day: int, hour: int, minute: int, second: float) -> float:
    """Julian date: days elapsed since noon, 1 January 4713 BC."""
    jd = (367.0 * year
          - math.floor(7 * (year + math.floor((month + 9) / 12.0)) * 0.25)
          + math.floor(275 * month / 9.0)
          + day + 1721013.5)
    fraction = (second + minute * 60.0 + hour * 3600.0) / 86400.0
    return jd + fraction


def jday_time(date: datetime) -> float:
    """Julian date of a datetime, to whole seconds."""
    return jday(date.year, date.month, date.day, date.hour, date.minute, float(date.second))


def gstime(jdut1: float) -> float:
    """Greenwich sidereal time (IAU-82) in radians for a UT1 Julian date."""
    tut1 = (jdut1 - JULIAN_DAY_JAN_1_2000) / JULIAN_CENTURY
    result = (-6.2e-6 * tut1 * tut1 * tut1 + 0.093104 * tut1 * tut1
              + (876600.0 * 3600 + 8640184.812866) * tut1 + 67310.54841)
    result = math.fmod(result * DEG2RAD / 240.0, TWOPI)
    if result < 0.0:
        result += TWOPI
    return result


def gstime_from_date(date: datetime) -> float:
    """Greenwich sidereal time in radians for a datetime."""
    return gstime(jday_time(date))


def eci_to_lla(eci: Vector3, gmst: float) -> tuple[float, Coordinates]:
    """Convert ECI coordinates to (orbital speed, latitude/longitude/altitude)."""
    a = EQUATOR_RADIUS
    b = POLAR_RADIUS
    f = (a - b) / a
    e2 = 2 * f - f ** 2

    sqx2y2 = math.sqrt(eci.x ** 2 + eci.y ** 2)
    longitude = math.atan2(eci.y, eci.x) - gmst
    latitude = math.atan2(eci.z, sqx2y2)

    c = 0.0
    for _ in range(20):
        c = 1 / math.sqrt(1 - e2 * (math.sin(latitude) * math.sin(latitude)))
        latitude = math.atan2(eci.z + a * c * e2 * math.sin(latitude), sqx2y2)

    altitude = sqx2y2 / math.cos(latitude) - a * c
    velocity = math.sqrt(GRAVITY_EARTH / (altitude + EQUATOR_RADIUS))
    return velocity, Coordinates(latitude=latitude, longitude=longitude, altitude=altitude)


def lat_long_deg(rad: Coordinates) -> Coordinates:
    """Convert latitude and longitude from radians to degrees."""
    longitude = math.fmod(rad.longitude / math.pi * 180, 360)
    if longitude > 180:
        longitude = 360 - longitude
    elif longitude < -180:
        longitude = 360 + longitude

    if rad.latitude < -math.pi / 2 or rad.latitude > math.pi / 2:
        raise InvalidLatitudeError()
    return Coordinates(latitude=rad.latitude / math.pi * 180, longitude=longitude)


def theta_g_jd(jday: float) -> float:
    """Greenwich mean sidereal time in radians from a Julian date."""
    ut = math.modf(jday + 0.5)[0]
    jday -= ut
    tu = (jday - JULIAN_DAY_JAN_1_2000) / JULIAN_CENTURY
    gmst = 24110.54841 + tu * (8640184.812866 + tu * (0.093104 - tu * 6.2e-6))
    gmst = math.fmod(gmst + 86400.0 * 1.00273790934 * ut, SECONDS_IN_DAY)
    return TWOPI * gmst / SECONDS_IN_DAY


def lla_to_eci(obs: Coordinates, jday: float, grav: GravConst) -> Vector3:
    """Convert geodetic latitude, longitude (radians) and altitude (km) to ECI km."""
    theta = math.fmod(theta_g_jd(jday) + obs.longitude, TWOPI)
    lat_sin = math.sin(obs.latitude)
    lat_cos = math.cos(obs.latitude)
    flat = grav.flattening
    c = 1 / math.sqrt(1 + flat * (flat - 2) * lat_sin * lat_sin)
    sq = c * (1 - flat) * (1 - flat)
    achcp = (grav.radiusearthkm * c + obs.altitude) * lat_cos
    return Vector3(
        x=achcp * math.cos(theta),
        y=achcp * math.sin(theta),
        z=(grav.radiusearthkm * sq + obs.altitude) * lat_sin,
    )


def eci_to_ecef(eci: Vector3, gmst: float) -> Vector3:
    """Rotate ECI coordinates into the Earth-fixed frame."""
    cos_g = math.cos(gmst)
    sin_g = math.sin(gmst)
    return Vector3(
        x=eci.x * cos_g + eci.y * sin_g,
        y=eci.x * -sin_g + eci.y * cos_g,
        z=eci.z,
    )


def _atan_of_ratio(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return math.atan(numerator / denominator)
    if numerator == 0.0:
        return math.nan
    return math.copysign(math.pi / 2, numerator) * math.copysign(1.0, denominator)


def eci_to_look_angles(eci_sat: Vector3, obs: Coordinates, jday: float,
                       grav: GravConst) -> LookAngles:
    """Look angles from an observer (radians, km) to a satellite in ECI km."""
    theta = math.fmod(theta_g_jd(jday) + obs.longitude, TWOPI)
    obs_pos = lla_to_eci(obs, jday, grav)

    rx = eci_sat.x - obs_pos.x
    ry = eci_sat.y - obs_pos.y
    rz = eci_sat.z - obs_pos.z

    lat_sin = math.sin(obs.latitude)
    lat_cos = math.cos(obs.latitude)
    theta_sin = math.sin(theta)
    theta_cos = math.cos(theta)

    top_s = lat_sin * theta_cos * rx + lat_sin * theta_sin * ry - lat_cos * rz
    top_e = -theta_sin * rx + theta_cos * ry
    top_z = lat_cos * theta_cos * rx + lat_cos * theta_sin * ry + lat_sin * rz

    azimuth = _atan_of_ratio(-top_e, top_s)
    if top_s > 0:
        azimuth += math.pi
    if azimuth < 0:
        azimuth += TWOPI

    distance = math.sqrt(rx * rx + ry * ry + rz * rz)
    ratio = top_z / distance if distance else math.nan
    elevation = math.asin(ratio) if -1.0 <= ratio <= 1.0 else math.nan
    return LookAngles(azimuth=azimuth, elevation=elevation, range=distance)