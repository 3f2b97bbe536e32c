"""Input validation utilities."""

from pathlib import Path
from typing import Sequence

from shpgeom.exceptions import InvalidPartOffsetsError, ValidationError


def validate_input_file(file_path: Path) -> None:
    """Validate that the input file exists and is a regular file.

    Args:
        file_path: Path to the input file.

    Raises:
        ValidationError: If the file is invalid.
    """
    if not file_path.exists():
        raise ValidationError(f"Input file not found: {file_path}")

    if not file_path.is_file():
        raise ValidationError(f"Input path is not a file: {file_path}")


def validate_part_counts(num_parts: int, num_points: int) -> None:
    """Validate the declared part and point counts of a record.

    Args:
        num_parts: Declared number of parts.
        num_points: Declared number of points.

    Raises:
        InvalidPartOffsetsError: If either count is negative.
    """
    if num_parts < 0:
        raise InvalidPartOffsetsError(f"Part count must be non-negative, got: {num_parts}")
    if num_points < 0:
        raise InvalidPartOffsetsError(
            f"Point count must be non-negative, got: {num_points}"
        )


def validate_part_offsets(offsets: Sequence[int], num_points: int) -> None:
    """Validate part-start offsets against the declared point count.

    The first offset must be 0, offsets must not decrease, and no offset
    may exceed the point count.

    Args:
        offsets: Part-start point offsets in record order.
        num_points: Declared number of points.

    Raises:
        InvalidPartOffsetsError: If the offsets do not describe valid ranges.
    """
    if not offsets:
        return

    if offsets[0] != 0:
        raise InvalidPartOffsetsError(f"First part offset must be 0, got: {offsets[0]}")

    previous = 0
    for index, offset in enumerate(offsets):
        if offset < previous:
            raise InvalidPartOffsetsError(
                f"Part offset {index} ({offset}) is less than the previous offset "
                f"({previous})"
            )
        if offset > num_points:
            raise InvalidPartOffsetsError(
                f"Part offset {index} ({offset}) exceeds point count {num_points}"
            )
        previous = offset
