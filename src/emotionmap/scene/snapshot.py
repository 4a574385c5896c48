"""
Headless snapshot rendering with matplotlib (Agg).

The axes span the whole figure and use pixel units with the same origin as
the Qt scene, so one data unit of the surface contract is one output pixel.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from emotionmap.model.points import Point, PointKey
from emotionmap.scene.chrome import draw_chrome
from emotionmap.scene.palette import MarkerStyle
from emotionmap.scene.reconciler import SceneReconciler
from emotionmap.scene.scale import PlotGeometry

logger = logging.getLogger(__name__)

_ANCHORS = {"start": "left", "middle": "center", "end": "right"}

# Fonts able to render the Chinese labels, first available wins
CJK_FONTS = ["Noto Sans CJK SC", "Microsoft YaHei", "SimHei", "PingFang SC", "DejaVu Sans"]


class MatplotlibSurface:
    """DrawingSurface backed by a matplotlib Figure."""

    def __init__(self, geometry: PlotGeometry | None = None, dpi: int = 100) -> None:
        self.geometry = geometry or PlotGeometry()
        self.dpi = dpi
        g = self.geometry
        self.figure = Figure(figsize=(g.canvas_width / dpi, g.canvas_height / dpi), dpi=dpi)
        FigureCanvasAgg(self.figure)
        self.ax = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self._setup_axes()

    def _setup_axes(self) -> None:
        g = self.geometry
        m = g.margins
        self.ax.set_xlim(-m.left, g.width + m.right)
        # Inverted: pixel y grows downward
        self.ax.set_ylim(g.height + m.bottom, -m.top)
        self.ax.set_axis_off()

    # ---- DrawingSurface ----

    def create_marker(self, key: PointKey, x: float, y: float, style: MarkerStyle) -> Circle:
        patch = Circle(
            (x, y),
            radius=style.radius,
            facecolor=style.fill if style.fill is not None else "none",
            edgecolor=style.stroke,
            linewidth=style.stroke_width * 72 / self.dpi,
            alpha=style.opacity,
            zorder=3,
        )
        self.ax.add_patch(patch)
        return patch

    def update_marker(
        self,
        handle: Circle,
        *,
        radius: Optional[float] = None,
        opacity: Optional[float] = None,
        duration_ms: int = 0,
    ) -> None:
        # Static output, transitions collapse to their end state
        if radius is not None:
            handle.set_radius(radius)
        if opacity is not None:
            handle.set_alpha(opacity)

    def remove_marker(self, handle: Circle) -> None:
        handle.remove()

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        color: str = "#000",
        size: float = 12.0,
        bold: bool = False,
        anchor: str = "middle",
        rotation: float = 0.0,
    ):
        # Rotation is given clockwise-negative like SVG, matplotlib turns counter-clockwise
        return self.ax.text(
            x, y, text,
            color=color,
            fontsize=size * 72 / self.dpi,
            fontweight="bold" if bold else "normal",
            ha=_ANCHORS.get(anchor, "center"),
            va="center",
            rotation=-rotation,
            fontfamily=CJK_FONTS,
            zorder=2,
        )

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        color: str = "#000",
        width: float = 1.0,
        dashed: bool = False,
    ) -> Line2D:
        line = Line2D(
            [x1, x2], [y1, y2],
            color=color,
            linewidth=width * 72 / self.dpi,
            linestyle=(0, (5, 5)) if dashed else "-",
            zorder=1,
        )
        self.ax.add_line(line)
        return line

    def clear(self) -> None:
        self.ax.cla()
        self._setup_axes()

    # ---- Output ----

    def save(self, path: str) -> None:
        self.figure.savefig(path, facecolor="white")
        logger.info(f"Snapshot written to {path}")


def render_snapshot(points: Sequence[Point], path: str, geometry: PlotGeometry | None = None) -> MatplotlibSurface:
    """Draw the chart with the given visible points and save it to `path`."""
    surface = MatplotlibSurface(geometry)
    draw_chrome(surface, surface.geometry)
    SceneReconciler(surface.geometry).reconcile((), points, surface)
    surface.save(path)
    return surface
