"""Decoders for shapefile polyline and polygon records."""

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from shpgeom.config import DecoderConfig, ShapeType
from shpgeom.exceptions import RecordDecodeError, UnsupportedShapeTypeError
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
from shpgeom.utils.logging import get_logger
from shpgeom.utils.validation import validate_part_counts, validate_part_offsets

logger = get_logger(__name__)


def read_bbox(cursor: ByteCursor) -> BoundingBox:
    """Read four little-endian doubles as (lo_x, lo_y, hi_x, hi_y)."""
    lo_x = cursor.read_f64_le()
    lo_y = cursor.read_f64_le()
    hi_x = cursor.read_f64_le()
    hi_y = cursor.read_f64_le()
    return BoundingBox(lo_x, lo_y, hi_x, hi_y)


def _read_points(cursor: ByteCursor, count: int) -> tuple[Point, ...]:
    # Arguments are evaluated left to right, so x is read before y
    return tuple(Point(cursor.read_f64_le(), cursor.read_f64_le()) for _ in range(count))


def _read_counts(cursor: ByteCursor, strict: bool) -> tuple[int, int]:
    num_parts = cursor.read_i32_le()
    num_points = cursor.read_i32_le()
    if strict:
        validate_part_counts(num_parts, num_points)
    return num_parts, num_points


def _read_offsets(
    cursor: ByteCursor, num_parts: int, num_points: int, strict: bool
) -> list[int]:
    offsets = [cursor.read_i32_le() for _ in range(num_parts)]
    if strict:
        validate_part_offsets(offsets, num_points)
    return offsets


def _part_ranges(offsets: list[int], num_points: int) -> Iterator[tuple[int, int]]:
    """Yield the [start, end) point range of each part; the last part ends at num_points."""
    for k, start in enumerate(offsets):
        end = offsets[k + 1] if k + 1 < len(offsets) else num_points
        yield start, end


def read_polyline(
    cursor: ByteCursor, strict: bool = False
) -> Union[LineString, MultiLineString]:
    """Decode a polyline body into a LineString or MultiLineString.

    A record with exactly one part becomes a LineString; any other part
    count (including zero) becomes a MultiLineString.

    Args:
        cursor: Cursor positioned just after the bounding box.
        strict: Validate part counts and offsets before reading points.

    Returns:
        The decoded line geometry.
    """
    num_parts, num_points = _read_counts(cursor, strict)

    if num_parts == 1:
        # The single part offset is always 0
        cursor.skip(4)
        line = LineString(_read_points(cursor, num_points))
        logger.debug(f"Decoded polyline: 1 part, {num_points} points")
        return line

    offsets = _read_offsets(cursor, num_parts, num_points, strict)
    lines = tuple(
        LineString(_read_points(cursor, end - start))
        for start, end in _part_ranges(offsets, num_points)
    )
    logger.debug(f"Decoded polyline: {num_parts} parts, {num_points} points")
    return MultiLineString(lines)


def read_polygon(
    cursor: ByteCursor, strict: bool = False
) -> Union[Polygon, MultiPolygon]:
    """Decode a polygon body into a Polygon or MultiPolygon.

    Ring roles are inferred in a single pass. The first ring is always an
    exterior ring. After that, a clockwise ring closes the polygon being
    built and starts a new one, and any other ring is a hole of the current
    polygon. A MultiPolygon is returned only if more than one polygon was
    started.

    Args:
        cursor: Cursor positioned just after the bounding box.
        strict: Validate part counts and offsets before reading points.

    Returns:
        The decoded polygon geometry.
    """
    num_parts, num_points = _read_counts(cursor, strict)
    offsets = _read_offsets(cursor, num_parts, num_points, strict)

    completed: list[Polygon] = []
    exterior = LinearRing()
    holes: list[LinearRing] = []

    for k, (start, end) in enumerate(_part_ranges(offsets, num_points)):
        ring = LinearRing(_read_points(cursor, end - start))
        if k == 0:
            exterior = ring
        elif ring.is_clockwise:
            completed.append(Polygon(exterior, tuple(holes)))
            exterior = ring
            holes = []
        else:
            holes.append(ring)

    polygon = Polygon(exterior, tuple(holes))
    if completed:
        completed.append(polygon)
        logger.debug(
            f"Decoded polygon: {num_parts} rings into {len(completed)} polygons"
        )
        return MultiPolygon(tuple(completed))

    logger.debug(f"Decoded polygon: {num_parts} rings, {len(holes)} holes")
    return polygon


def decode_geometry(
    cursor: ByteCursor, shape_type: int, strict: bool = False
) -> tuple[Optional[BoundingBox], Optional[Geometry]]:
    """Decode the body of a record whose shape type is already known.

    Z and M variants decode their XY part only; the measure blocks that
    follow the points are left unread.

    Args:
        cursor: Cursor positioned just after the shape type.
        shape_type: Shape type code of the record.
        strict: Validate part counts and offsets before reading points.

    Returns:
        (bbox, geometry), both None for a null shape.

    Raises:
        UnsupportedShapeTypeError: For point, multipoint, multipatch and
            unknown shape types.
    """
    try:
        shape_type = ShapeType(shape_type)
    except ValueError:
        logger.warning(f"Unknown shape type: {shape_type}")
        raise UnsupportedShapeTypeError(f"Unknown shape type: {shape_type}")

    if shape_type == ShapeType.NULL:
        return None, None

    if shape_type.is_polyline:
        bbox = read_bbox(cursor)
        return bbox, read_polyline(cursor, strict=strict)

    if shape_type.is_polygon:
        bbox = read_bbox(cursor)
        return bbox, read_polygon(cursor, strict=strict)

    logger.warning(f"No geometry decoder for shape type {shape_type.name}")
    raise UnsupportedShapeTypeError(
        f"Shape type {shape_type.name} ({shape_type.value}) is not supported"
    )


@dataclass(frozen=True)
class RecordHeader:
    """Record number and content length from the big-endian record header."""

    record_number: int
    content_length: int  # In 16-bit words

    @property
    def content_bytes(self) -> int:
        """Content length in bytes."""
        return self.content_length * 2


@dataclass(frozen=True)
class ShapeRecord:
    """A decoded record."""

    header: RecordHeader
    shape_type: ShapeType
    bbox: Optional[BoundingBox]
    geometry: Optional[Geometry]

    @property
    def is_null(self) -> bool:
        """Whether the record holds a null shape."""
        return self.geometry is None


class RecordDecoder:
    """Reads record headers and dispatches record content to the decoders."""

    def __init__(self, config: Optional[DecoderConfig] = None):
        """Initialize the decoder.

        Args:
            config: Decoder configuration (default: trusting, non-strict).
        """
        self.config = config or DecoderConfig()
        self.logger = get_logger(__name__)

    def read_header(self, cursor: ByteCursor) -> RecordHeader:
        """Read the record number and content length."""
        record_number = cursor.read_i32_be()
        content_length = cursor.read_i32_be()
        return RecordHeader(record_number, content_length)

    def read_record(self, cursor: RecordCursor) -> ShapeRecord:
        """Decode one record starting at the cursor position.

        The content is decoded through a cursor bounded to the record's
        declared length, and the outer cursor is left at the start of the
        next record whether or not the decoders consumed every byte.

        Args:
            cursor: Cursor positioned at a record header.

        Returns:
            The decoded record.
        """
        header = self.read_header(cursor)
        if header.content_length < 0:
            raise RecordDecodeError(
                f"Record {header.record_number} has negative content length "
                f"{header.content_length}"
            )

        content = cursor.take(header.content_bytes)
        shape_type = content.read_i32_le()
        bbox, geometry = decode_geometry(content, shape_type, strict=self.config.strict)
        shape_type = ShapeType(shape_type)

        self.logger.debug(
            f"Record {header.record_number}: {shape_type.name}, "
            f"{content.remaining} trailing bytes"
        )
        return ShapeRecord(header, shape_type, bbox, geometry)

    def iter_records(self, cursor: RecordCursor) -> Iterator[ShapeRecord]:
        """Yield consecutive records until the cursor is exhausted."""
        while cursor.remaining > 0:
            yield self.read_record(cursor)
