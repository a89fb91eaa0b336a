import pytest

from ovbias import render_line_chart


class TestRenderLineChart:
    def test_writes_png(self, tmp_path):
        out = tmp_path / "chart.png"
        path = render_line_chart([1.0, 2.0, 3.0], [0.1, 0.3, 0.2], out, "Bias", "alpha_y", "bias")
        assert path == out
        assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_constant_series(self, tmp_path):
        out = tmp_path / "flat.png"
        render_line_chart([1.0, 2.0], [0.5, 0.5], out, "Flat", "x", "y")
        assert out.exists()

    def test_length_mismatch_raises(self, tmp_path):
        with pytest.raises(ValueError, match="same length"):
            render_line_chart([1.0, 2.0], [0.5], tmp_path / "x.png", "t", "x", "y")

    def test_empty_series_raises(self, tmp_path):
        with pytest.raises(ValueError, match="empty"):
            render_line_chart([], [], tmp_path / "x.png", "t", "x", "y")
