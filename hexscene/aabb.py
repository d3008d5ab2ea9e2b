"""Two-dimensional axis-aligned box described by four corners."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable

from hexscene.renderer import Vector3

_POINTS_CHECKED = 6


@dataclass
class AABB2D:
    corners: tuple[Vector3, ...] = field(default_factory=lambda: (Vector3(),) * 4)

    def __post_init__(self):
        self.corners = tuple(self.corners)
        if len(self.corners) != 4:
            raise ValueError("a box needs exactly four corners")

    @classmethod
    def from_bounds(cls, min_x: float, min_z: float, max_x: float, max_z: float) -> AABB2D:
        """Build a box on the XZ plane from its extents."""
        return cls((
            Vector3(min_x, 0.0, min_z),
            Vector3(max_x, 0.0, min_z),
            Vector3(min_x, 0.0, max_z),
            Vector3(max_x, 0.0, max_z),
        ))

    def points_inside(self, points: Iterable[Vector3]) -> bool:
        """True when any of the first six points shares an X or Y value with a corner."""
        xs = {corner.x for corner in self.corners}
        ys = {corner.y for corner in self.corners}
        return any(p.x in xs or p.y in ys for p in islice(points, _POINTS_CHECKED))