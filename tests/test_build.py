"""Tests for geometry constructors."""

import numpy as np
import pytest

from geomkit.errors import ShapeError, TypeTagError
from geomkit.handles import Collection
from geomkit.model.build import (
    make_point, make_points, make_multipoint, linestring_to_points,
    make_line, make_linestring, make_linestrings,
    make_multilinestring, linestrings_to_multilinestring,
    make_polygon, make_polygons,
)
from geomkit.model.types import Point, MultiPoint, Line, LineString, MultiLineString, Polygon


class TestPoints:
    """Test point constructors."""

    def test_make_point(self):
        h = make_point(1.5, -2.0)
        assert h.tag == "point"
        assert isinstance(h.geometry, Point)
        assert (h.geometry.x, h.geometry.y) == (1.5, -2.0)

    def test_make_points_one_per_row(self):
        """An N x 2 table yields exactly N points in row order."""
        pts = make_points([[0, 0], [1, 1], [2, 4]])
        assert isinstance(pts, Collection)
        assert pts.tag == "rs_POINT"
        assert len(pts) == 3
        assert [tuple(h.geometry.coord) for h in pts] == [(0, 0), (1, 1), (2, 4)]

    def test_make_multipoint_keeps_order_and_duplicates(self):
        pts = make_points([[0, 0], [1, 1], [0, 0]])
        mp = make_multipoint(pts)
        assert mp.tag == "multipoint"
        assert isinstance(mp.geometry, MultiPoint)
        np.testing.assert_array_equal(mp.geometry.coords, [[0, 0], [1, 1], [0, 0]])

    def test_make_multipoint_from_list_of_handles(self):
        mp = make_multipoint([make_point(1, 2), make_point(3, 4)])
        assert len(mp.geometry) == 2

    def test_make_multipoint_rejects_other_tags(self):
        with pytest.raises(TypeTagError):
            make_multipoint([make_point(0, 0), make_line([0, 0], [1, 1])])
        with pytest.raises(TypeTagError):
            make_multipoint(make_linestrings([[[0, 0], [1, 1]]]))

    def test_make_multipoint_rejects_absent(self):
        pts = Collection([make_point(0, 0), None], "point")
        with pytest.raises(ShapeError):
            make_multipoint(pts)

    def test_linestring_to_points(self, l_path):
        pts = linestring_to_points(l_path)
        assert pts.tag == "rs_POINT"
        assert [tuple(h.geometry.coord) for h in pts] == [(0, 0), (10, 0), (10, 10)]


class TestLines:
    """Test line and linestring constructors."""

    def test_make_line(self):
        h = make_line([0, 0], [3, 4])
        assert h.tag == "line"
        assert isinstance(h.geometry, Line)
        np.testing.assert_array_equal(h.geometry.coords, [[0, 0], [3, 4]])

    def test_make_line_coincident_endpoints(self):
        assert make_line([1, 1], [1, 1]).tag == "line"

    @pytest.mark.parametrize("a, b", [([0, 0, 0], [1, 1]), ([0, 0], [1]), ([0, 0], [1, 2, 3])])
    def test_make_line_bad_coordinate(self, a, b):
        with pytest.raises(ShapeError):
            make_line(a, b)

    def test_make_linestring_uses_every_row(self, l_table):
        h = make_linestring(l_table)
        assert h.tag == "linestring"
        assert isinstance(h.geometry, LineString)
        assert len(h.geometry) == 3
        np.testing.assert_array_equal(h.geometry.coords, l_table)

    def test_make_linestring_empty_and_duplicates(self):
        assert len(make_linestring(np.empty((0, 2))).geometry) == 0
        dup = make_linestring([[0, 0], [0, 0], [1, 0]])
        assert len(dup.geometry) == 3

    def test_make_linestring_bad_table(self):
        with pytest.raises(ShapeError):
            make_linestring([[0, 0, 0]])

    def test_make_linestrings_one_per_table(self):
        tables = [[[0, 0], [1, 0]], [[0, 0], [0, 1], [1, 1]], [[5, 5], [6, 6]]]
        lines = make_linestrings(tables)
        assert lines.tag == "rs_LINESTRING"
        assert [len(h.geometry) for h in lines] == [2, 3, 2]

    def test_make_linestrings_absent(self):
        lines = make_linestrings([[[0, 0], [1, 0]], None])
        assert lines[1] is None
        assert list(lines.absent()) == [False, True]


class TestMultiLineStrings:
    """Test multilinestring constructors."""

    def test_from_tables_and_handles(self, l_path):
        mls = make_multilinestring([[[0, 0], [1, 1]], l_path, [[2, 2], [3, 3], [4, 4]]])
        assert mls.tag == "multilinestring"
        assert isinstance(mls.geometry, MultiLineString)
        assert [len(ls) for ls in mls.geometry.lines] == [2, 3, 3]

    def test_from_collection(self):
        lines = make_linestrings([[[0, 0], [1, 0]], [[0, 1], [1, 1]]])
        mls = make_multilinestring(lines)
        assert len(mls.geometry) == 2
        assert len(linestrings_to_multilinestring(lines).geometry) == 2

    def test_wrong_handle_tag(self):
        with pytest.raises(TypeTagError):
            make_multilinestring([make_point(0, 0)])

    def test_wrong_collection_tag(self):
        with pytest.raises(TypeTagError):
            linestrings_to_multilinestring(make_points([[0, 0]]))

    def test_absent_entry(self):
        lines = make_linestrings([[[0, 0], [1, 0]], None])
        with pytest.raises(ShapeError):
            linestrings_to_multilinestring(lines)


class TestPolygons:
    """Test polygon constructors."""

    def test_exterior_and_holes(self, square_ring):
        hole1 = [[1, 1], [2, 1], [2, 2], [1, 1]]
        hole2 = [[2.5, 2.5], [3, 2.5], [3, 3], [2.5, 2.5]]
        h = make_polygon([square_ring, hole1, hole2])
        assert h.tag == "polygon"
        assert isinstance(h.geometry, Polygon)
        assert len(h.geometry.exterior) == 5
        assert len(h.geometry.interiors) == 2

    def test_ring_from_handle(self, square_ring):
        h = make_polygon([make_linestring(square_ring)])
        assert len(h.geometry.interiors) == 0

    def test_no_closure_rule(self):
        """Open rings are accepted unchanged."""
        h = make_polygon([[[0, 0], [1, 0], [1, 1]]])
        assert len(h.geometry.exterior) == 3

    def test_empty_ring_list(self):
        with pytest.raises(ShapeError):
            make_polygon([])

    def test_make_polygons(self, square_ring):
        polys = make_polygons([[square_ring], [square_ring, [[1, 1], [2, 1], [2, 2]]]])
        assert polys.tag == "rs_POLYGON"
        assert len(polys) == 2
        assert len(polys[1].geometry.interiors) == 1

    def test_make_polygons_reports_index(self, square_ring):
        with pytest.raises(ShapeError) as exc:
            make_polygons([[square_ring], []])
        assert exc.value.context["polygon"] == 1


class TestValueTypes:
    """Multi-part values only hold the variant they are made of."""

    def test_wrong_part_types(self):
        line = LineString(np.zeros((2, 2)))
        point = Point(np.array([0.0, 0.0]))
        with pytest.raises(TypeTagError):
            MultiPoint([line])
        with pytest.raises(TypeTagError):
            MultiLineString([point])
        with pytest.raises(TypeTagError) as exc:
            Polygon(line, (line, point))
        assert exc.value.context == {"index": 2, "type": "Point"}
