"""Configuration dataclasses and enums for the shpgeom package."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ShapeType(int, Enum):
    """Shape type codes stored in the shapefile record content."""

    NULL = 0
    POINT = 1
    POLYLINE = 3
    POLYGON = 5
    MULTIPOINT = 8
    POINTZ = 11
    POLYLINEZ = 13
    POLYGONZ = 15
    MULTIPOINTZ = 18
    POINTM = 21
    POLYLINEM = 23
    POLYGONM = 25
    MULTIPOINTM = 28
    MULTIPATCH = 31

    @property
    def is_polyline(self) -> bool:
        """True for the 2D, Z and M polyline variants."""
        return self in (ShapeType.POLYLINE, ShapeType.POLYLINEZ, ShapeType.POLYLINEM)

    @property
    def is_polygon(self) -> bool:
        """True for the 2D, Z and M polygon variants."""
        return self in (ShapeType.POLYGON, ShapeType.POLYGONZ, ShapeType.POLYGONM)


class OutputFormat(str, Enum):
    """Output format for decoded records on the command line."""

    GEOJSON = "geojson"
    WKT = "wkt"
    SUMMARY = "summary"


@dataclass
class DecoderConfig:
    """Configuration for geometry decoding."""

    strict: bool = False  # Validate part counts and offsets before reading points


@dataclass
class CLIConfig:
    """Configuration for a command-line decoding run."""

    input_file: Path
    offset: int = 0
    output_format: OutputFormat = OutputFormat.GEOJSON
    strict: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        """Convert paths and validate configuration."""
        if isinstance(self.input_file, str):
            self.input_file = Path(self.input_file)
        if isinstance(self.output_format, str):
            self.output_format = OutputFormat(self.output_format)

        if self.offset < 0:
            raise ValueError(f"--offset must be non-negative, got: {self.offset}")

    @property
    def decoder_config(self) -> DecoderConfig:
        """Decoder settings derived from this run."""
        return DecoderConfig(strict=self.strict)
