# orbitprop

Satellite orbit propagation with the SGP4/SDP4 model, driven by two-line
element sets (TLEs). Besides the propagator the package offers coordinate
helpers: Julian dates, Greenwich sidereal time, ECI to geodetic conversion,
ECI to ECEF rotation, and azimuth/elevation look angles from a ground
observer.

Pure Python, no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Propagating a satellite

```python
from datetime import datetime, timezone

from orbitprop.gravity import Gravity
from orbitprop.initialization import tle_to_sat
from orbitprop.propagator import propagate

line1 = "1 25544U 98067A   20140.34419374 -.00000374  00000-0  13653-5 0  9990"
line2 = "2 25544  51.6433 131.2277 0001338 330.3524 173.1622 15.49372617227549"

sat = tle_to_sat(line1, line2, Gravity.WGS72)
when = datetime(2020, 5, 23, 20, 23, 37, tzinfo=timezone.utc)
position, velocity = propagate(sat, when)   # Vector3 in km and km/s
```

`tle_to_sat` parses the lines, picks the gravity model (a `Gravity` member or
its name such as `"wgs72"`) and initialises the propagator with `sgp4init`.

`propagate(sat, date)` works on a copy of `sat` and uses the date to the
whole second. `orbitprop.propagator.sgp4(sat, tsince)` propagates to a time
given in minutes since the element set's epoch and updates the satellite's
working state in place.

Propagation problems are raised as subclasses of
`orbitprop.propagator.SGP4Error` (itself a `ValueError`):
`InvalidMeanMotionError`, `InvalidMeanEccentricityError`,
`InvalidPerturbedEccentricityError`, `InvalidSemilatusRectumError` and
`SatelliteDecayError`. The last one keeps the computed `position` and
`velocity` as attributes.

## Look angles from the ground

```python
import math

from orbitprop.conversions import Coordinates, eci_to_look_angles, jday_time

observer = Coordinates(
    latitude=math.radians(55.6167),
    longitude=math.radians(12.65),
    altitude=0.005,              # km
)
angles = eci_to_look_angles(position, observer, jday_time(when), sat.gravity_const)
print(math.degrees(angles.azimuth), math.degrees(angles.elevation), angles.range)
```

Angles are in radians and distances in kilometres throughout. Other helpers
in `orbitprop.conversions`: `jday`, `gstime`, `gstime_from_date`,
`theta_g_jd`, `eci_to_lla`, `lla_to_eci`, `eci_to_ecef`, `lat_long_deg`
(raises `InvalidLatitudeError` for a latitude outside ±π/2) and
`days2mdhms`.

## Parsing element sets

`orbitprop.tle.parse_tle(line1, line2)` returns a `TLE` with the catalogue
number, epoch, drag terms and mean orbital elements as written in the lines;
short lines or malformed fields raise `TLEParseError` (a `ValueError`).
`TLE.epoch_time(now=None)` turns the two-digit epoch year and day of the
year into a UTC `datetime`; years up to four past `now` count as the current
century, later ones as the previous century.

## Gravity models

`orbitprop.gravity.Gravity` selects one of `wgs72old`, `wgs72` or `wgs84`;
`get_grav_const(name)` returns the matching `GravConst` and raises
`ValueError` for any other name.

## Which satellites are overhead?

The `visible-sats` command reads a file of TLEs, propagates each satellite to
the current time with the WGS72 model and reports whether it is above the
observer's horizon, with its azimuth and elevation when it is:

```
visible-sats --file stations.txt --lat 0.9707 --lon 0.2208 --alt 0.005
```

Latitude and longitude are given in radians, altitude in kilometres, and the
reported azimuth and elevation are in radians too. `--file` is required; the
other options default to 0. Blank lines, comment lines (`#` or `//`),
satellite name lines and lines shorter than 60 characters are skipped. A
summary of the run time and of parsed, failed, visible and hidden satellites
closes the output.