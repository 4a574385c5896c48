"""Tests for the static chart decorations."""

from emotionmap.scene.chrome import X_LABEL, Y_LABEL, draw_chrome
from emotionmap.scene.palette import GUIDE_COLOR, Quadrant
from emotionmap.scene.scale import PlotGeometry


class TestChrome:

    def test_labels_drawn(self, surface):
        draw_chrome(surface, PlotGeometry())
        texts = [t[0] for t in surface.texts]
        assert X_LABEL in texts
        assert Y_LABEL in texts
        assert "(0,0)" in texts
        for quadrant in Quadrant:
            assert str(quadrant) in texts

    def test_tick_labels(self, surface):
        draw_chrome(surface, PlotGeometry())
        texts = [t[0] for t in surface.texts]
        assert texts.count("0.0") == 2
        assert "-1.2" in texts and "1.2" in texts

    def test_y_title_rotated(self, surface):
        draw_chrome(surface, PlotGeometry())
        title = next(t for t in surface.texts if t[0] == Y_LABEL)
        assert title[3]["rotation"] == -90.0

    def test_dashed_guides_cross_the_centre(self, surface):
        draw_chrome(surface, PlotGeometry())
        guides = [line for line in surface.lines if line[4].get("dashed")]
        assert len(guides) == 2
        assert all(line[4]["color"] == GUIDE_COLOR for line in guides)
        assert (0.0, 240.0, 720.0, 240.0) in [line[:4] for line in guides]

    def test_no_markers(self, surface):
        draw_chrome(surface, PlotGeometry())
        assert surface.markers == {}
