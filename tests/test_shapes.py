"""Tests for the geometry value types."""

import dataclasses

import numpy as np
import pytest
from shapely import geometry as sgeom

from shpgeom.geometry.shapes import (
    BoundingBox,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)
from builders import FAR_SQUARE_CW, HOLE_CCW, SQUARE_CW


def ring(points):
    return LinearRing(tuple(Point(x, y) for x, y in points))


class TestValues:
    """Tests for immutability and equality."""

    def test_values_are_frozen(self):
        line = LineString((Point(0, 0), Point(1, 1)))
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.points = ()

    def test_structural_equality(self):
        assert Polygon(ring(SQUARE_CW), (ring(HOLE_CCW),)) == Polygon(
            ring(SQUARE_CW), (ring(HOLE_CCW),)
        )
        assert Polygon(ring(SQUARE_CW)) != Polygon(ring(HOLE_CCW))

    def test_ring_orientation_property(self):
        assert ring(SQUARE_CW).is_clockwise
        assert not ring(HOLE_CCW).is_clockwise

    def test_as_array(self):
        arr = ring(SQUARE_CW).as_array()
        assert arr.shape == (4, 2)
        assert arr.dtype == np.float64
        assert LineString().as_array().shape == (0, 2)

    def test_polygon_rings_order(self):
        polygon = Polygon(ring(SQUARE_CW), (ring(HOLE_CCW),))
        assert polygon.rings == (ring(SQUARE_CW), ring(HOLE_CCW))


class TestGeoInterface:
    """Tests for __geo_interface__."""

    def test_line_string(self):
        line = LineString((Point(0, 0), Point(1, 2)))
        assert line.__geo_interface__ == {
            "type": "LineString",
            "coordinates": ((0, 0), (1, 2)),
        }

    def test_multi_line_string(self):
        multi = MultiLineString(
            (LineString((Point(0, 0), Point(1, 1))), LineString((Point(2, 2), Point(3, 3))))
        )
        geo = multi.__geo_interface__
        assert geo["type"] == "MultiLineString"
        assert geo["coordinates"] == (((0, 0), (1, 1)), ((2, 2), (3, 3)))

    def test_polygon_rings_not_closed(self):
        geo = Polygon(ring(SQUARE_CW), (ring(HOLE_CCW),)).__geo_interface__
        assert geo["type"] == "Polygon"
        assert len(geo["coordinates"]) == 2
        assert len(geo["coordinates"][0]) == 4

    def test_multi_polygon(self):
        multi = MultiPolygon((Polygon(ring(SQUARE_CW)), Polygon(ring(FAR_SQUARE_CW))))
        geo = multi.__geo_interface__
        assert geo["type"] == "MultiPolygon"
        assert len(geo["coordinates"]) == 2

    def test_shapely_shape_accepts_geo_interface(self):
        polygon = Polygon(ring(SQUARE_CW), (ring(HOLE_CCW),))
        shape = sgeom.shape(polygon)
        assert shape.area == pytest.approx(15.0)


class TestToShapely:
    """Tests for shapely conversion."""

    def test_line_string(self):
        shape = LineString((Point(0, 0), Point(3, 4))).to_shapely()
        assert isinstance(shape, sgeom.LineString)
        assert shape.length == pytest.approx(5.0)

    def test_multi_line_string(self):
        multi = MultiLineString(
            (LineString((Point(0, 0), Point(1, 0))), LineString((Point(0, 1), Point(2, 1))))
        )
        shape = multi.to_shapely()
        assert isinstance(shape, sgeom.MultiLineString)
        assert shape.length == pytest.approx(3.0)

    def test_polygon_with_hole(self):
        shape = Polygon(ring(SQUARE_CW), (ring(HOLE_CCW),)).to_shapely()
        assert isinstance(shape, sgeom.Polygon)
        assert len(shape.interiors) == 1
        assert shape.area == pytest.approx(15.0)

    def test_multi_polygon(self):
        multi = MultiPolygon((Polygon(ring(SQUARE_CW)), Polygon(ring(FAR_SQUARE_CW))))
        shape = multi.to_shapely()
        assert isinstance(shape, sgeom.MultiPolygon)
        assert shape.area == pytest.approx(32.0)

    def test_bounding_box(self):
        shape = BoundingBox(0.0, 0.0, 2.0, 3.0).to_shapely()
        assert shape.bounds == (0.0, 0.0, 2.0, 3.0)


class TestDegenerateToShapely:
    """Degenerate geometry still converts to (invalid) shapely geometry."""

    def test_single_point_line(self):
        shape = LineString((Point(1, 1),)).to_shapely()
        assert isinstance(shape, sgeom.LineString)
        assert list(shape.coords) == [(1.0, 1.0), (1.0, 1.0)]
        assert shape.length == 0.0

    def test_empty_line(self):
        assert LineString().to_shapely().is_empty

    def test_two_point_hole(self):
        polygon = Polygon(ring(SQUARE_CW), (ring([(1.0, 1.0), (2.0, 2.0)]),))
        shape = polygon.to_shapely()
        assert isinstance(shape, sgeom.Polygon)
        assert len(shape.interiors) == 1
        assert len(shape.interiors[0].coords) == 4
        assert not shape.is_valid

    def test_single_point_exterior(self):
        shape = Polygon(ring([(3.0, 3.0)])).to_shapely()
        assert list(shape.exterior.coords) == [(3.0, 3.0)] * 4

    def test_empty_exterior(self):
        assert Polygon(LinearRing()).to_shapely().is_empty

    def test_empty_hole_dropped(self):
        shape = Polygon(ring(SQUARE_CW), (LinearRing(),)).to_shapely()
        assert len(shape.interiors) == 0

    def test_closed_ring_not_closed_twice(self):
        shape = Polygon(ring(SQUARE_CW + [SQUARE_CW[0]])).to_shapely()
        assert len(shape.exterior.coords) == 5

    def test_multi_line_string_with_empty_part(self):
        multi = MultiLineString(
            (LineString(), LineString((Point(0, 0), Point(2, 0))), LineString((Point(5, 5),)))
        )
        shape = multi.to_shapely()
        assert isinstance(shape, sgeom.MultiLineString)
        assert len(shape.geoms) == 2
        assert shape.length == pytest.approx(2.0)

    def test_multi_polygon_with_degenerate_member(self):
        sliver = Polygon(ring([(10.0, 10.0), (11.0, 11.0)]))
        multi = MultiPolygon((Polygon(ring(SQUARE_CW)), sliver))
        shape = multi.to_shapely()
        assert isinstance(shape, sgeom.MultiPolygon)
        assert len(shape.geoms) == 2
