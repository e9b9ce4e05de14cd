"""Tests for text and matplotlib views."""

import matplotlib.pyplot as plt
import pytest

from geomkit.handles import Collection
from geomkit.model.build import make_point, make_points, make_polygon, make_multilinestring
from geomkit.post.plot_geo import plot_handles, plot_segments
from geomkit.post.printing import format_handle, format_collection, print_handle
from geomkit.segment import segmentize


class TestPrinting:
    """Test format_handle / format_collection / print_handle."""

    def test_format_linestring(self, l_path):
        text = format_handle(l_path)
        lines = text.splitlines()
        assert lines[0] == "<linestring 3 coords>"
        assert lines[1:] == ["  (0, 0)", "  (10, 0)", "  (10, 10)"]

    def test_format_polygon_and_multilinestring(self, square_ring):
        poly = make_polygon([square_ring, [[1, 1], [2, 1], [2, 2]]])
        text = format_handle(poly)
        assert "exterior:" in text
        assert "hole 1:" in text
        mls = make_multilinestring([[[0, 0], [1, 1]]])
        assert "linestring 0:" in format_handle(mls)

    def test_format_collection_marks_absent(self):
        c = Collection([make_point(1, 2), None], "point")
        text = format_collection(c)
        assert text.splitlines()[0] == "<rs_POINT [2] (1 absent)>"
        assert "[1] <absent>" in text
        assert "[0] <point (1, 2)>" in text

    def test_print_handle(self, l_path, capsys):
        print_handle(l_path)
        print_handle(make_points([[0, 0]]))
        out = capsys.readouterr().out
        assert "<linestring 3 coords>" in out
        assert "<rs_POINT [1]>" in out


class TestPlotting:
    """Test plot_handles / plot_segments (Agg backend)."""

    def test_plot_handles_saves(self, l_path, square_ring, tmp_path):
        target = tmp_path / "geo.png"
        items = [l_path, make_points([[1, 1], [2, 2]]), make_polygon([square_ring])]
        plot_handles(items, show=False, save_path=str(target), settings={"dpi": 50})
        assert target.exists()

    def test_plot_on_existing_axes(self, l_path):
        fig, ax = plt.subplots()
        out = plot_handles(l_path, show=False, ax=ax)
        assert out is ax
        assert len(ax.lines) == 1
        plt.close(fig)

    def test_plot_segments(self, l_path, tmp_path):
        target = tmp_path / "segments.png"
        plot_segments(segmentize(l_path, 4), show=False, save_path=str(target))
        assert target.exists()

    def test_plot_segments_requires_linestrings(self):
        with pytest.raises(ValueError):
            plot_segments(make_points([[0, 0]]), show=False)
