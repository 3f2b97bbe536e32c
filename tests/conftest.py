"""Shared fixtures for the test suite."""

import pytest

from shpgeom.parsers.cursor import RecordCursor


@pytest.fixture
def cursor_for():
    """Build a RecordCursor over the given bytes."""

    def _make(data):
        return RecordCursor(data)

    return _make
