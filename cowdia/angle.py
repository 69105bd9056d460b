"""Angles in radians and degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass

PI: float = 4.0 * math.atan(1.0)


@dataclass
class Radian:
    """An angle measured in radians."""

    value: float = 0.0

    def to_degree(self) -> Degree:
        """Return the same angle in degrees."""
        return Degree(self.value * 180.0 / PI)


@dataclass
class Degree:
    """An angle measured in degrees."""

    value: float = 0.0

    def to_radian(self) -> Radian:
        """Return the same angle in radians."""
        return Radian(self.value * PI / 180.0)