"""Tests for segmentize."""

import numpy as np
import pytest

from geomkit.errors import RangeError, ShapeError, TypeTagError
from geomkit.model.build import make_line, make_linestring, make_points
from geomkit.segment import segmentize, segmentize_linestring, line_length


def _coords(pieces):
    return [h.geometry.coords.tolist() for h in pieces]


class TestSegmentize:
    """Test segmentize."""

    def test_two_pieces_of_l_path(self, l_path):
        pieces = segmentize(l_path, 2)
        assert pieces.tag == "rs_LINESTRING"
        assert _coords(pieces) == [[[0, 0], [10, 0]], [[10, 0], [10, 10]]]

    def test_four_pieces_of_l_path(self, l_path):
        """Boundaries on vertices are not repeated inside the next piece."""
        pieces = segmentize(l_path, 4)
        assert _coords(pieces) == [
            [[0, 0], [5, 0]],
            [[5, 0], [10, 0]],
            [[10, 0], [10, 5]],
            [[10, 5], [10, 10]],
        ]

    def test_several_boundaries_in_one_segment(self):
        pieces = segmentize(make_linestring([[0, 0], [8, 0]]), 4)
        assert _coords(pieces) == [[[0, 0], [2, 0]], [[2, 0], [4, 0]],
                                   [[4, 0], [6, 0]], [[6, 0], [8, 0]]]

    def test_n_one_returns_whole_line(self, l_path, l_table):
        pieces = segmentize(l_path, 1)
        assert len(pieces) == 1
        np.testing.assert_array_equal(pieces[0].geometry.coords, l_table)

    @pytest.mark.parametrize("n", [2, 3, 5, 7, 13])
    def test_equal_lengths_and_total(self, n):
        path = make_linestring([[0, 0], [3, 4], [3, 10], [-2, 10], [-2, 11.5]])
        total = line_length(path.geometry)
        pieces = segmentize(path, n)
        assert len(pieces) == n
        lengths = [line_length(h.geometry) for h in pieces]
        assert lengths == pytest.approx([total / n] * n, abs=1e-9)
        assert sum(lengths) == pytest.approx(total, abs=1e-9)

    @pytest.mark.parametrize("n", [2, 3, 6, 10])
    def test_exact_continuity(self, n):
        path = make_linestring([[0.1, 0.2], [1.7, 3.3], [2.9, -1.1], [5.3, 0.7]])
        pieces = segmentize(path, n)
        for a, b in zip(pieces, pieces[1:]):
            assert np.array_equal(a.geometry.coords[-1], b.geometry.coords[0])
        np.testing.assert_array_equal(pieces[0].geometry.coords[0], [0.1, 0.2])
        np.testing.assert_array_equal(pieces[n - 1].geometry.coords[-1], [5.3, 0.7])

    def test_pieces_retrace_path(self, l_path):
        pieces = segmentize(l_path, 3)
        joined = np.vstack([pieces[0].geometry.coords] +
                           [h.geometry.coords[1:] for h in pieces[1:]])
        assert line_length(make_linestring(joined).geometry) == pytest.approx(20.0)

    def test_zero_length_line(self):
        pieces = segmentize_linestring(make_linestring([[1, 1], [1, 1]]).geometry, 3)
        assert len(pieces) == 3
        for p in pieces:
            assert p.coords.tolist() == [[1, 1], [1, 1]]

    @pytest.mark.parametrize("n", [0, -1, 2.5, True, "3", None])
    def test_bad_n(self, l_path, n):
        with pytest.raises(RangeError):
            segmentize(l_path, n)

    def test_numpy_integer_n(self, l_path):
        assert len(segmentize(l_path, np.int64(2))) == 2

    def test_wrong_tag(self):
        with pytest.raises(TypeTagError):
            segmentize(make_line([0, 0], [1, 0]), 2)
        with pytest.raises(TypeTagError):
            segmentize(make_points([[0, 0], [1, 0]]), 2)

    def test_too_few_coordinates(self):
        with pytest.raises(ShapeError):
            segmentize(make_linestring(np.empty((0, 2))), 2)
