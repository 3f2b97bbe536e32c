"""Utility modules."""

from shpgeom.utils.validation import (
    validate_input_file,
    validate_part_counts,
    validate_part_offsets,
)
from shpgeom.utils.logging import setup_logging, get_logger

__all__ = [
    "validate_input_file",
    "validate_part_counts",
    "validate_part_offsets",
    "setup_logging",
    "get_logger",
]
