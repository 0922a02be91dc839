"""Physical and astronomical constants shared across the package."""

import math

TWOPI = math.pi * 2.0
JULIAN_DAY_JAN_1_2000 = 2451545.0
JULIAN_CENTURY = 36525.0
SECONDS_IN_DAY = 86400.0
DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi
XPDOTP = 1440.0 / TWOPI
GRAVITY_EARTH = 398600.4418
EQUATOR_RADIUS = 6378.137
POLAR_RADIUS = 6356.7523142