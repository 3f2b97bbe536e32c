"""Geometry value types and ring orientation."""

from shpgeom.geometry.orientation import is_clockwise, signed_area
from shpgeom.geometry.shapes import (
    BoundingBox,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = [
    "is_clockwise",
    "signed_area",
    "BoundingBox",
    "LinearRing",
    "LineString",
    "MultiLineString",
    "MultiPolygon",
    "Point",
    "Polygon",
]
