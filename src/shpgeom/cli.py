"""Command-line interface for the shpgeom package."""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from shapely.geometry import GeometryCollection

from shpgeom.config import CLIConfig, OutputFormat
from shpgeom.exceptions import ShpGeomError
from shpgeom.geometry.shapes import Geometry, MultiLineString, MultiPolygon, Polygon
from shpgeom.parsers.cursor import RecordCursor
from shpgeom.parsers.records import RecordDecoder, ShapeRecord
from shpgeom.utils.logging import LOG_LEVELS, setup_logging, get_logger
from shpgeom.utils.validation import validate_input_file


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="shpgeom",
        description="Decode shapefile polyline and polygon records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shpgeom roads.shp --offset 100
  shpgeom parcels.shp --offset 100 --format wkt
  shpgeom record.bin --format summary --strict -v
        """,
    )

    parser.add_argument(
        "input_file",
        type=Path,
        help="File of back-to-back shapefile records",
    )
    parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Byte offset of the first record header (100 for a .shp file)",
    )
    parser.add_argument(
        "--format",
        type=str,
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.GEOJSON.value,
        help="Output format, one line per record (default: geojson)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject records with inconsistent part offsets",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (overrides --verbose)",
    )

    return parser.parse_args(args)


def _count_parts_and_points(geometry: Optional[Geometry]) -> tuple[int, int]:
    if geometry is None:
        return 0, 0
    if isinstance(geometry, MultiLineString):
        return len(geometry), sum(len(line) for line in geometry)
    if isinstance(geometry, Polygon):
        return len(geometry.rings), sum(len(ring) for ring in geometry.rings)
    if isinstance(geometry, MultiPolygon):
        rings = [ring for polygon in geometry for ring in polygon.rings]
        return len(rings), sum(len(ring) for ring in rings)
    return 1, len(geometry)


def format_record(record: ShapeRecord, output_format: OutputFormat) -> str:
    """Render a decoded record as a single output line."""
    geometry = record.geometry

    if output_format == OutputFormat.GEOJSON:
        return json.dumps(
            {
                "type": "Feature",
                "id": record.header.record_number,
                "bbox": list(record.bbox.as_tuple()) if record.bbox is not None else None,
                "geometry": geometry.__geo_interface__ if geometry is not None else None,
                "properties": {"shape_type": record.shape_type.name},
            }
        )

    if output_format == OutputFormat.WKT:
        shape = geometry.to_shapely() if geometry is not None else GeometryCollection()
        return f"{record.header.record_number}\t{shape.wkt}"

    num_parts, num_points = _count_parts_and_points(geometry)
    geom_type = geometry.geom_type if geometry is not None else "Null"
    return (
        f"{record.header.record_number}\t{record.shape_type.name}\t{geom_type}\t"
        f"parts={num_parts}\tpoints={num_points}"
    )


def run_decode(config: CLIConfig) -> int:
    """Decode every record in the input file and print it.

    Returns:
        Number of records decoded.
    """
    logger = get_logger(__name__)

    data = config.input_file.read_bytes()
    if config.offset > len(data):
        raise ShpGeomError(
            f"Offset {config.offset} is past the end of {config.input_file} "
            f"({len(data)} bytes)"
        )

    logger.info(f"Decoding records from: {config.input_file}")
    cursor = RecordCursor(data, start=config.offset)
    decoder = RecordDecoder(config.decoder_config)

    count = 0
    for record in decoder.iter_records(cursor):
        print(format_record(record, config.output_format))
        count += 1

    logger.info(f"Decoded {count} records")
    return count


def main(args: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parsed_args = parse_args(args)

    setup_logging(verbose=parsed_args.verbose, level=parsed_args.log_level)
    logger = get_logger(__name__)

    try:
        validate_input_file(parsed_args.input_file)

        config = CLIConfig(
            input_file=parsed_args.input_file,
            offset=parsed_args.offset,
            output_format=OutputFormat(parsed_args.output_format),
            strict=parsed_args.strict,
            verbose=parsed_args.verbose,
        )

        run_decode(config)
        return 0

    except (ShpGeomError, ValueError) as e:
        logger.error(f"Decode error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
