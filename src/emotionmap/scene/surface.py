"""
Drawing Surface Contract
========================
The chart logic never calls a rendering API directly. It drives an object
implementing DrawingSurface, whose coordinates are pixels inside the plot area
(origin top-left, y growing downward).

Implementations:
    emotionmap.app.ui.chart.ChartView: interactive Qt scene.
    emotionmap.scene.snapshot.MatplotlibSurface: headless image export.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol

from emotionmap.model.points import PointKey
from emotionmap.scene.palette import MarkerStyle

# Opaque object returned by the surface for a drawn item
Handle = Any


class DrawingSurface(Protocol):

    def create_marker(self, key: PointKey, x: float, y: float, style: MarkerStyle) -> Handle:
        """Draw a circular marker centred at (x, y) and return its handle."""
        ...

    def update_marker(
        self,
        handle: Handle,
        *,
        radius: Optional[float] = None,
        opacity: Optional[float] = None,
        duration_ms: int = 0,
    ) -> None:
        """Change marker attributes, interpolating over duration_ms if supported."""
        ...

    def remove_marker(self, handle: Handle) -> None:
        ...

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
    ) -> Handle:
        """Draw a text label. anchor is one of "start", "middle", "end"."""
        ...

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
    ) -> Handle:
        ...

    def clear(self) -> None:
        """Remove everything drawn so far."""
        ...
