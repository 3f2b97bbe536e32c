"""Sequential typed reads over a shapefile record's bytes."""

from struct import Struct
from typing import Optional, Protocol

from shpgeom.exceptions import TruncatedRecordError

unpack_i32_be = Struct(">i").unpack_from
unpack_i32_le = Struct("<i").unpack_from
unpack_f64_le = Struct("<d").unpack_from


class ByteCursor(Protocol):
    """Capabilities the geometry decoders need from a record cursor."""

    def read_i32_be(self) -> int: ...

    def read_i32_le(self) -> int: ...

    def read_f64_le(self) -> float: ...

    def skip(self, n_bytes: int) -> None: ...


class RecordCursor:
    """Cursor over an in-memory byte span.

    Reads advance the position and never go past ``end``; a read that
    would raises TruncatedRecordError and leaves the position unchanged.
    """

    def __init__(self, data: bytes, start: int = 0, end: Optional[int] = None):
        """Initialize the cursor.

        Args:
            data: Buffer holding one or more records.
            start: Offset of the first byte to read.
            end: Offset one past the last readable byte (default: end of data).
        """
        self._data = memoryview(data)
        if end is None:
            end = len(self._data)
        if not 0 <= start <= end <= len(self._data):
            raise ValueError(
                f"Invalid cursor span [{start}, {end}) for {len(self._data)} bytes"
            )
        self._pos = start
        self._end = end

    @property
    def position(self) -> int:
        """Absolute offset of the next byte to read."""
        return self._pos

    @property
    def remaining(self) -> int:
        """Number of bytes left before the end of the span."""
        return self._end - self._pos

    def _advance(self, n_bytes: int) -> int:
        if n_bytes < 0:
            raise ValueError(f"Cannot advance by a negative byte count: {n_bytes}")
        if n_bytes > self.remaining:
            raise TruncatedRecordError(
                f"Read of {n_bytes} bytes at offset {self._pos} runs past "
                f"end of record at offset {self._end}"
            )
        pos = self._pos
        self._pos += n_bytes
        return pos

    def read_i32_be(self) -> int:
        """Read a big-endian signed 32-bit integer."""
        return unpack_i32_be(self._data, self._advance(4))[0]

    def read_i32_le(self) -> int:
        """Read a little-endian signed 32-bit integer."""
        return unpack_i32_le(self._data, self._advance(4))[0]

    def read_f64_le(self) -> float:
        """Read a little-endian IEEE-754 double."""
        return unpack_f64_le(self._data, self._advance(8))[0]

    def skip(self, n_bytes: int) -> None:
        """Advance past n_bytes without decoding them."""
        self._advance(n_bytes)

    def take(self, n_bytes: int) -> "RecordCursor":
        """Split off a cursor bounded to the next n_bytes.

        The returned cursor covers ``[position, position + n_bytes)`` and this
        cursor moves past that span.
        """
        start = self._advance(n_bytes)
        return RecordCursor(self._data, start, start + n_bytes)
