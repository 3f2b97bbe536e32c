"""Immutable vector geometry values produced by the record decoders."""

from dataclasses import dataclass
from typing import Any, Iterator, NamedTuple, Union

import numpy as np
from shapely import geometry as sgeom

from shpgeom.geometry.orientation import is_clockwise


class Point(NamedTuple):
    """A 2D point with x (easting) and y (northing) coordinates."""

    x: float
    y: float


def _coords(points: tuple[Point, ...]) -> tuple[tuple[float, float], ...]:
    return tuple((p.x, p.y) for p in points)


def _closed_ring_coords(points: tuple[Point, ...]) -> tuple[tuple[float, float], ...]:
    """Closed ring coordinates padded to the four shapely requires.

    Rings with fewer than three distinct points come out as invalid but
    constructible shapely rings; shapely's is_valid reports them.
    """
    coords = _coords(points)
    if coords[0] != coords[-1]:
        coords = coords + (coords[0],)
    while len(coords) < 4:
        coords = coords + (coords[-1],)
    return coords


def _line_coords(points: tuple[Point, ...]) -> tuple[tuple[float, float], ...]:
    coords = _coords(points)
    if len(coords) == 1:
        # shapely lines need zero or at least two coordinates
        coords = coords * 2
    return coords


def _as_array(points: tuple[Point, ...]) -> np.ndarray:
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array(points, dtype=np.float64)


@dataclass(frozen=True)
class BoundingBox:
    """Record bounding box as stored on disk; min <= max is not enforced."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Get the bounding box as (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_shapely(self) -> sgeom.Polygon:
        """Convert to a rectangular shapely polygon."""
        return sgeom.box(self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class LinearRing:
    """A ring of points bounding a polygon or a hole.

    The ring is implicitly closed. Points are kept exactly as decoded, so
    the closing point is repeated only if the record repeats it.
    """

    points: tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    @property
    def is_clockwise(self) -> bool:
        """Whether the ring winds clockwise."""
        return is_clockwise(self.points)

    @property
    def coords(self) -> tuple[tuple[float, float], ...]:
        return _coords(self.points)

    def as_array(self) -> np.ndarray:
        """Get an (n, 2) float64 array of the ring coordinates."""
        return _as_array(self.points)


@dataclass(frozen=True)
class LineString:
    """An open sequence of points."""

    points: tuple[Point, ...] = ()

    geom_type = "LineString"

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    @property
    def coords(self) -> tuple[tuple[float, float], ...]:
        return _coords(self.points)

    def as_array(self) -> np.ndarray:
        """Get an (n, 2) float64 array of the line coordinates."""
        return _as_array(self.points)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {"type": self.geom_type, "coordinates": self.coords}

    def to_shapely(self) -> sgeom.LineString:
        """Convert to a shapely LineString."""
        return sgeom.LineString(_line_coords(self.points))


@dataclass(frozen=True)
class MultiLineString:
    """An ordered collection of line strings from a multi-part record."""

    lines: tuple[LineString, ...] = ()

    geom_type = "MultiLineString"

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> LineString:
        return self.lines[index]

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {
            "type": self.geom_type,
            "coordinates": tuple(line.coords for line in self.lines),
        }

    def to_shapely(self) -> sgeom.MultiLineString:
        """Convert to a shapely MultiLineString, dropping empty parts."""
        return sgeom.MultiLineString(
            [line.to_shapely() for line in self.lines if line.points]
        )


@dataclass(frozen=True)
class Polygon:
    """One exterior ring and zero or more interior rings (holes)."""

    exterior: LinearRing
    interiors: tuple[LinearRing, ...] = ()

    geom_type = "Polygon"

    @property
    def rings(self) -> tuple[LinearRing, ...]:
        """Exterior ring followed by the holes."""
        return (self.exterior,) + self.interiors

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {
            "type": self.geom_type,
            "coordinates": tuple(ring.coords for ring in self.rings),
        }

    def to_shapely(self) -> sgeom.Polygon:
        """Convert to a shapely Polygon.

        An empty exterior gives an empty polygon and empty holes are dropped.
        """
        if not self.exterior.points:
            return sgeom.Polygon()
        return sgeom.Polygon(
            _closed_ring_coords(self.exterior.points),
            [_closed_ring_coords(ring.points) for ring in self.interiors if ring.points],
        )


@dataclass(frozen=True)
class MultiPolygon:
    """An ordered collection of polygons from a multi-part record."""

    polygons: tuple[Polygon, ...] = ()

    geom_type = "MultiPolygon"

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)

    def __getitem__(self, index: int) -> Polygon:
        return self.polygons[index]

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {
            "type": self.geom_type,
            "coordinates": tuple(
                tuple(ring.coords for ring in polygon.rings)
                for polygon in self.polygons
            ),
        }

    def to_shapely(self) -> sgeom.MultiPolygon:
        """Convert to a shapely MultiPolygon, dropping polygons with no exterior."""
        return sgeom.MultiPolygon(
            [polygon.to_shapely() for polygon in self.polygons if polygon.exterior.points]
        )


# Exactly one variant is produced per decoded record
Geometry = Union[LineString, MultiLineString, Polygon, MultiPolygon]
