"""
Map geometry for the nazotte (draw-an-area) search.

The database narrows candidates with a bounding-box query; the polygon test
itself runs here with shapely. ``Polygon.contains`` is strict, so points that
sit exactly on the drawn outline are outside, matching ``ST_Contains``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel
from shapely.geometry import Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import make_valid


class Coordinate(BaseModel):
    """A point on the map in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box around a drawn polygon."""

    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    @classmethod
    def around(cls, coordinates: Sequence[Coordinate]) -> "BoundingBox":
        latitudes = [c.latitude for c in coordinates]
        longitudes = [c.longitude for c in coordinates]
        return cls(
            min_latitude=min(latitudes),
            max_latitude=max(latitudes),
            min_longitude=min(longitudes),
            max_longitude=max(longitudes),
        )


def _areal_shape(polygon: Polygon) -> Optional[BaseGeometry]:
    if not polygon.is_valid:
        repaired = make_valid(polygon)
        parts = getattr(repaired, "geoms", [repaired])
        polygon = unary_union([p for p in parts if p.geom_type in ("Polygon", "MultiPolygon")])
    return None if polygon.is_empty else polygon


class DrawnArea:
    """Polygon drawn by a user, in (latitude, longitude) order."""

    def __init__(self, coordinates: Sequence[Coordinate]) -> None:
        if not coordinates:
            raise ValueError("a drawn area needs at least one coordinate")
        self.coordinates: List[Coordinate] = list(coordinates)
        self.bounding_box = BoundingBox.around(self.coordinates)
        points = [(c.latitude, c.longitude) for c in self.coordinates]
        self._shape = _areal_shape(Polygon(points)) if len(set(points)) >= 3 else None

    def contains(self, latitude: float, longitude: float) -> bool:
        """Whether the point lies strictly inside the polygon.

        An outline that crosses itself keeps the lobes it encloses. Outlines
        without area contain nothing.
        """
        if self._shape is None:
            return False
        return self._shape.contains(Point(latitude, longitude))

    def filter(self, items: Iterable, limit: int) -> list:
        """Keep items with ``latitude``/``longitude`` inside the area, up to ``limit``."""
        kept = []
        for item in items:
            if self.contains(item.latitude, item.longitude):
                kept.append(item)
                if len(kept) >= limit:
                    break
        return kept
