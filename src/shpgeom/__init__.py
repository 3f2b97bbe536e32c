"""Decoding of ESRI Shapefile polyline and polygon records into vector geometries."""

__version__ = "0.1.0"

from shpgeom.config import DecoderConfig, OutputFormat, ShapeType
from shpgeom.geometry.orientation import is_clockwise, signed_area
from shpgeom.geometry.shapes import (
    BoundingBox,
    Geometry,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)
from shpgeom.parsers.cursor import ByteCursor, RecordCursor
from shpgeom.parsers.records import (
    RecordDecoder,
    RecordHeader,
    ShapeRecord,
    decode_geometry,
    read_bbox,
    read_polygon,
    read_polyline,
)

__all__ = [
    "__version__",
    "DecoderConfig",
    "OutputFormat",
    "ShapeType",
    "is_clockwise",
    "signed_area",
    "BoundingBox",
    "Geometry",
    "LinearRing",
    "LineString",
    "MultiLineString",
    "MultiPolygon",
    "Point",
    "Polygon",
    "ByteCursor",
    "RecordCursor",
    "RecordDecoder",
    "RecordHeader",
    "ShapeRecord",
    "decode_geometry",
    "read_bbox",
    "read_polygon",
    "read_polyline",
]
