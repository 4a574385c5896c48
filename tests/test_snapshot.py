"""Tests for headless matplotlib rendering and the export command."""

from matplotlib.patches import Circle

from emotionmap.__main__ import main
from emotionmap.model.points import PointStore
from emotionmap.scene.palette import HIGHLIGHT_RADIUS, marker_style
from emotionmap.scene.snapshot import MatplotlibSurface, render_snapshot


def _circles(surface):
    return [p for p in surface.ax.patches if isinstance(p, Circle)]


class TestMatplotlibSurface:

    def test_marker_lifecycle(self):
        surface = MatplotlibSurface()
        handle = surface.create_marker(("a", "快乐", "高"), 100.0, 50.0, marker_style("快乐"))
        assert len(_circles(surface)) == 1
        surface.update_marker(handle, radius=HIGHLIGHT_RADIUS, opacity=1.0, duration_ms=200)
        assert handle.get_radius() == HIGHLIGHT_RADIUS
        assert handle.get_alpha() == 1.0
        surface.remove_marker(handle)
        assert _circles(surface) == []

    def test_clear_keeps_pixel_limits(self):
        surface = MatplotlibSurface()
        surface.draw_line(0, 0, 10, 10)
        surface.clear()
        assert len(surface.ax.lines) == 0
        assert surface.ax.get_xlim() == (-60.0, 740.0)
        assert surface.ax.get_ylim() == (540.0, -60.0)


class TestRenderSnapshot:

    def test_png_written(self, groups, tmp_path):
        path = tmp_path / "chart.png"
        surface = render_snapshot(PointStore(groups).points, str(path))
        assert path.exists() and path.stat().st_size > 0
        assert len(_circles(surface)) == 4

    def test_cli_export(self, data_file, tmp_path):
        path = tmp_path / "out.png"
        assert main(["--data", str(data_file), "--export", str(path)]) == 0
        assert path.exists()

    def test_cli_export_fallback_exit_code(self, tmp_path):
        path = tmp_path / "out.png"
        assert main(["--data", str(tmp_path / "missing.json"), "--export", str(path)]) == 1
        assert path.exists()
