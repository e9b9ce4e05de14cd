"""Tests for table <-> coordinate conversion."""

import numpy as np
import pytest

from geomkit.coords import table_to_coordinates, coordinates_to_table, coordinate
from geomkit.errors import ShapeError


class TestTableToCoordinates:
    """Test table_to_coordinates."""

    def test_keeps_every_row_in_order(self):
        """A 3-row table yields 3 coordinates in the same order."""
        table = [[0, 0], [1, 2], [3, 4]]
        coords = table_to_coordinates(table)
        assert coords.shape == (3, 2)
        np.testing.assert_array_equal(coords, np.array(table, dtype=float))

    def test_result_is_read_only_copy(self):
        """The returned array does not alias or expose caller memory."""
        table = np.array([[0.0, 0.0], [1.0, 1.0]])
        coords = table_to_coordinates(table)
        table[0, 0] = 99.0
        assert coords[0, 0] == 0.0
        with pytest.raises(ValueError):
            coords[0, 0] = 5.0

    @pytest.mark.parametrize("empty", [np.empty((0, 2)), [], np.empty((0, 0))])
    def test_empty_table(self, empty):
        """Empty tables give an empty (0, 2) sequence."""
        assert table_to_coordinates(empty).shape == (0, 2)

    @pytest.mark.parametrize("bad", [
        [[0, 0, 0], [1, 1, 1]],
        [1, 2],
        [[0, 0], [np.nan, 1]],
        [[0, 0], [np.inf, 1]],
        None,
        [["a", "b"]],
    ])
    def test_malformed_tables(self, bad):
        """Wrong column count, non-finite or non-numeric data raise ShapeError."""
        with pytest.raises(ShapeError):
            table_to_coordinates(bad)


class TestCoordinatesToTable:
    """Test coordinates_to_table."""

    def test_round_trip(self):
        """Table -> coordinates -> table preserves rows and order."""
        table = np.array([[0.5, -1.0], [2.0, 3.0], [2.0, 3.0]])
        back = coordinates_to_table(table_to_coordinates(table))
        np.testing.assert_array_equal(back, table)
        assert back.flags.writeable

    def test_empty(self):
        """Empty coordinates give an empty 0 x 2 table."""
        assert coordinates_to_table(np.empty((0, 2))).shape == (0, 2)


class TestCoordinate:
    """Test coordinate."""

    def test_valid_pair(self):
        np.testing.assert_array_equal(coordinate([1, 2]), [1.0, 2.0])

    @pytest.mark.parametrize("bad", [[1, 2, 3], [1], [[1, 2]], [1, np.nan]])
    def test_invalid(self, bad):
        """Anything but two finite numbers raises ShapeError."""
        with pytest.raises(ShapeError):
            coordinate(bad)
