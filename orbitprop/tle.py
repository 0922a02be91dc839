"""Two-line element set parsing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_LINE1_MIN_LENGTH = 61
_LINE2_MIN_LENGTH = 68


class TLEParseError(ValueError):
    """Raised when a two-line element set cannot be parsed."""


@dataclass(frozen=True)
class TLE:
    """The fields of a two-line element set."""

    line1: str
    line2: str
    catalog_number: str
    epoch_year: int
    epoch_day: float
    first_time_derivative_of_mean_motion: float
    second_time_derivative_of_mean_motion: float
    bstar: float
    inclination: float
    right_ascension_of_ascending_node: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float
    mean_motion: float
    orbit_number_at_epoch: int

    def epoch_time(self, now: datetime | None = None) -> datetime:
        """Epoch as a UTC datetime.

        Two-digit years up to four years past ``now`` map to the current
        century, later ones to the previous century.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        full_year = now.year
        short_year = full_year % 100
        if self.epoch_year <= short_year + 4:
            year = full_year - short_year + self.epoch_year
        else:
            year = full_year - short_year - 100 + self.epoch_year

        fractional_days, days = math.modf(self.epoch_day)
        fractional_hours, hours = math.modf(24 * fractional_days)
        fractional_minutes, minutes = math.modf(60 * fractional_hours)
        fractional_seconds, seconds = math.modf(60 * fractional_minutes)
        milliseconds = 1000 * fractional_seconds

        start = datetime(year, 1, 1, tzinfo=timezone.utc) - timedelta(days=1)
        return start + timedelta(
            days=int(days),
            hours=int(hours),
            minutes=int(minutes),
            seconds=int(seconds),
            milliseconds=int(milliseconds),
        )


def _parse_float(text: str, field: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise TLEParseError(f"{field}: invalid number {text!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise TLEParseError(f"{field}: invalid number {text!r}") from exc


def _parse_int(text: str, field: str) -> int:
    if not text or text != text.strip() or "_" in text:
        raise TLEParseError(f"{field}: invalid integer {text!r}")
    try:
        return int(text, 10)
    except ValueError as exc:
        raise TLEParseError(f"{field}: invalid integer {text!r}") from exc


def _compact(text: str) -> str:
    return text.replace(" ", "", 2)


def _implied_decimal(sign: str, mantissa: str, exponent: str) -> str:
    return _compact(f"{sign}.{mantissa}e{exponent}")


def parse_tle(line1: str, line2: str) -> TLE:
    """Parse the two lines of an element set.

    Raises TLEParseError when a line is too short or a field is malformed.
    """
    if len(line1) < _LINE1_MIN_LENGTH:
        raise TLEParseError(f"line 1 is shorter than {_LINE1_MIN_LENGTH} characters")
    if len(line2) < _LINE2_MIN_LENGTH:
        raise TLEParseError(f"line 2 is shorter than {_LINE2_MIN_LENGTH} characters")

    return TLE(
        line1=line1,
        line2=line2,
        catalog_number=line1[2:7].strip(),
        epoch_year=_parse_int(line1[18:20], "epoch year"),
        epoch_day=_parse_float(line1[20:32], "epoch days"),
        first_time_derivative_of_mean_motion=_parse_float(
            _compact(line1[33:43]), "first time derivative of mean motion"),
        second_time_derivative_of_mean_motion=_parse_float(
            _implied_decimal(line1[44:45], line1[45:50], line1[50:52]),
            "second time derivative of mean motion"),
        bstar=_parse_float(
            _implied_decimal(line1[53:54], line1[54:59], line1[59:61]), "b star"),
        inclination=_parse_float(_compact(line2[8:16]), "inclination"),
        right_ascension_of_ascending_node=_parse_float(
            _compact(line2[17:25]), "right ascension of ascending node"),
        eccentricity=_parse_float("." + line2[26:33], "eccentricity"),
        argument_of_perigee=_parse_float(_compact(line2[34:42]), "argument of perigee"),
        mean_anomaly=_parse_float(_compact(line2[43:51]), "mean anomaly"),
        mean_motion=_parse_float(_compact(line2[52:63]), "mean motion"),
        orbit_number_at_epoch=_parse_int(line2[63:68].strip(), "orbit number at epoch"),
    )