"""Static chart decorations: axes, ticks, centre guides and labels."""
from __future__ import annotations

import logging

from emotionmap.scene.palette import GUIDE_COLOR, ORIGIN_LABEL_COLOR, QUADRANT_LABELS
from emotionmap.scene.scale import PlotGeometry
from emotionmap.scene.surface import DrawingSurface

logger = logging.getLogger(__name__)

X_LABEL = "愉悦度 (Valence)"
Y_LABEL = "唤醒度 (Arousal)"
TICK_LENGTH = 6.0


def draw_chrome(surface: DrawingSurface, geometry: PlotGeometry) -> None:
    """
    Draw the axes through the origin, the dashed centre guides, the axis titles,
    the quadrant labels and the origin label.
    """
    w, h = geometry.width, geometry.height
    x_scale, y_scale = geometry.x_scale(), geometry.y_scale()
    cx, cy = x_scale(0.0), y_scale(0.0)

    # Axes through the origin
    surface.draw_line(0.0, cy, w, cy, color="#000")
    surface.draw_line(cx, 0.0, cx, h, color="#000")

    for v in x_scale.ticks():
        px = x_scale(v)
        surface.draw_line(px, cy, px, cy + TICK_LENGTH, color="#000")
        surface.draw_text(f"{v:.1f}", px, cy + TICK_LENGTH + 10, size=10)

    for v in y_scale.ticks():
        py = y_scale(v)
        surface.draw_line(cx - TICK_LENGTH, py, cx, py, color="#000")
        surface.draw_text(f"{v:.1f}", cx - TICK_LENGTH - 3, py, size=10, anchor="end")

    # Axis titles
    surface.draw_text(X_LABEL, w / 2, h + 40, size=16, bold=True)
    surface.draw_text(Y_LABEL, -40, h / 2, size=16, bold=True, rotation=-90.0)

    for label in QUADRANT_LABELS:
        surface.draw_text(str(label.quadrant), w * label.fx, h * label.fy, color=label.color, size=14)

    # Dashed centre guides
    surface.draw_line(0.0, h / 2, w, h / 2, color=GUIDE_COLOR, dashed=True)
    surface.draw_line(w / 2, 0.0, w / 2, h, color=GUIDE_COLOR, dashed=True)

    surface.draw_text("(0,0)", w / 2 + 5, h / 2 - 5, color=ORIGIN_LABEL_COLOR, size=12, anchor="start")
    logger.debug("Chart chrome drawn.")
