"""Byte builders for shapefile records used across the test suite."""

import struct

SQUARE_CCW = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]
SQUARE_CW = list(reversed(SQUARE_CCW))
HOLE_CCW = [(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 2.0)]
HOLE_CW = list(reversed(HOLE_CCW))
FAR_SQUARE_CW = [(10.0, 10.0), (10.0, 14.0), (14.0, 14.0), (14.0, 10.0)]


def pack_bbox(bbox):
    return struct.pack("<4d", *bbox)


def pack_parts_body(parts, offsets=None, num_points=None):
    """Pack num_parts, num_points, part offsets and points.

    Offsets default to the cumulative start of each part and num_points to
    the total number of points packed.
    """
    points = [pt for part in parts for pt in part]
    if offsets is None:
        offsets = []
        start = 0
        for part in parts:
            offsets.append(start)
            start += len(part)
    if num_points is None:
        num_points = len(points)
    body = struct.pack("<2i", len(offsets), num_points)
    body += struct.pack(f"<{len(offsets)}i", *offsets)
    for x, y in points:
        body += struct.pack("<2d", x, y)
    return body


def pack_record(record_number, shape_type, content=b""):
    """Pack a record header followed by shape type and content."""
    payload = struct.pack("<i", shape_type) + content
    assert len(payload) % 2 == 0
    return struct.pack(">2i", record_number, len(payload) // 2) + payload


def pack_shape_record(record_number, shape_type, parts, bbox=(0.0, 0.0, 1.0, 1.0)):
    return pack_record(record_number, shape_type, pack_bbox(bbox) + pack_parts_body(parts))
