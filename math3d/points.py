"""Coordinate geometry between three-dimensional points."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterator, NamedTuple, Tuple

from .scalar import divide

__all__ = ["Point", "Slope"]

log = logging.getLogger(__name__)


class Slope(NamedTuple):
    """Direction cosines of the line between two points.

    The labels are historical and pair with the values as ``xy = dz/d``,
    ``xz = dy/d`` and ``yz = dx/d`` where ``d`` is the distance.
    """

    xy: float
    xz: float
    yz: float


@dataclass(frozen=True, slots=True)
class Point:
    """A three-dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def delta_xyz(self, p2: "Point") -> Tuple[float, float, float]:
        """Changes in x, y and z going from this point to ``p2``."""
        return p2.x - self.x, p2.y - self.y, p2.z - self.z

    def distance(self, p2: "Point") -> float:
        dx, dy, dz = self.delta_xyz(p2)
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def point_slope(self, p2: "Point") -> Callable[[float], "Point"]:
        """Return ``t -> self + t * (p2 - self)`` for the line through both points.

        ::

            (mx, my, mz) = (x1, y1, z1) - (x0, y0, z0)
            (x, y, z)    = (x0, y0, z0) + t (mx, my, mz)
        """
        x0, y0, z0 = self.x, self.y, self.z
        mx, my, mz = self.delta_xyz(p2)

        def point_at(t: float) -> Point:
            return Point(x0 + t * mx, y0 + t * my, z0 + t * mz)

        return point_at

    def slope(self, p2: "Point") -> Slope:
        """Direction cosines of the line to ``p2``; NaN for coincident points."""
        dx, dy, dz = self.delta_xyz(p2)
        d = self.distance(p2)
        if d == 0:
            log.debug("Slope between coincident points %s; result is NaN", self)
        return Slope(divide(dz, d), divide(dy, d), divide(dx, d))
