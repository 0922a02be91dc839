"""Three-component vectors used for positions and velocities."""

from __future__ import annotations

from dataclasses import dataclass

_TOLERANCE = 1e-4


def close_float(a: float, b: float) -> bool:
    """Return True when two values differ by less than 1e-4."""
    return abs(a - b) < _TOLERANCE


@dataclass(frozen=True)
class Vector3:
    """A Cartesian vector in kilometres or kilometres per second."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def equals(self, other: Vector3) -> bool:
        """Compare component-wise within the close_float tolerance."""
        return (close_float(self.x, other.x)
                and close_float(self.y, other.y)
                and close_float(self.z, other.z))