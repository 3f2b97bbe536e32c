"""Custom exceptions for the shpgeom package."""


class ShpGeomError(Exception):
    """Base exception for all shpgeom errors."""

    pass


class RecordDecodeError(ShpGeomError):
    """Error decoding a shapefile record."""

    pass


class TruncatedRecordError(RecordDecodeError):
    """A read ran past the end of the record cursor."""

    pass


class UnsupportedShapeTypeError(RecordDecodeError):
    """Shape type has no geometry decoder."""

    pass


class ValidationError(ShpGeomError):
    """Input validation error."""

    pass


class InvalidPartOffsetsError(ValidationError):
    """Part offsets or counts are inconsistent with the point count."""

    pass
