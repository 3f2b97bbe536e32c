"""Record cursor and geometry record decoders."""

from shpgeom.parsers.cursor import ByteCursor, RecordCursor
from shpgeom.parsers.records import RecordDecoder, read_bbox, read_polygon, read_polyline

__all__ = [
    "ByteCursor",
    "RecordCursor",
    "RecordDecoder",
    "read_bbox",
    "read_polygon",
    "read_polyline",
]
