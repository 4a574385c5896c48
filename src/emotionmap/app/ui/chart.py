from __future__ import annotations

import logging
from typing import Optional

import pyqtgraph as pg
from PySide6.QtCore import QPointF, QRectF, QVariantAnimation, Qt, Signal
from PySide6.QtGui import QBrush, QFont, QPen
from PySide6.QtWidgets import (
    QGraphicsEllipseItem, QGraphicsLineItem, QGraphicsRectItem, QGraphicsSimpleTextItem, QWidget,
)

from emotionmap.model.points import PointKey
from emotionmap.scene.palette import MarkerStyle
from emotionmap.scene.scale import PlotGeometry

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------------
# Marker item
# -------------------------------------------------------------------------------

class MarkerItem(QGraphicsEllipseItem):
    """
    A circular marker centred on its position. Reports hover enter/leave to
    the owning ChartView and animates radius/opacity changes.
    """
    def __init__(self, key: PointKey, style: MarkerStyle, view: ChartView) -> None:
        super().__init__()
        self.key = key
        self._view = view
        self._radius = style.radius
        self._animation: Optional[QVariantAnimation] = None

        self._set_radius(style.radius)
        if style.fill is not None:
            self.setBrush(pg.mkBrush(style.fill))
        else:
            self.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        self.setPen(pg.mkPen(style.stroke, width=style.stroke_width))
        self.setOpacity(style.opacity)
        self.setAcceptHoverEvents(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setZValue(2)

    @property
    def radius(self) -> float:
        return self._radius

    def _set_radius(self, r: float) -> None:
        self._radius = r
        self.setRect(QRectF(-r, -r, 2 * r, 2 * r))

    def animate_to(self, radius: float, opacity: float, duration_ms: int) -> None:
        """Interpolate linearly from the current look to the target one."""
        if self._animation is not None:
            self._animation.stop()
            self._animation = None

        if duration_ms <= 0:
            self._set_radius(radius)
            self.setOpacity(opacity)
            return

        start_radius, start_opacity = self._radius, self.opacity()

        def step(t) -> None:
            t = float(t)
            self._set_radius(start_radius + (radius - start_radius) * t)
            self.setOpacity(start_opacity + (opacity - start_opacity) * t)

        anim = QVariantAnimation()
        anim.setStartValue(0.0)
        anim.setEndValue(1.0)
        anim.setDuration(duration_ms)
        anim.valueChanged.connect(step)
        anim.start()
        self._animation = anim

    def hoverEnterEvent(self, event) -> None:
        self._view.marker_hovered.emit(self.key)
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event) -> None:
        self._view.marker_unhovered.emit(self.key)
        super().hoverLeaveEvent(event)


# -------------------------------------------------------------------------------
# Chart view (drawing surface)
# -------------------------------------------------------------------------------

class ChartView(pg.GraphicsView):
    """
    Qt drawing surface for the emotion chart.

    The scene uses canvas pixels. Everything the chart logic draws is parented
    to a root item placed at the top-left corner of the plot area, so surface
    coordinates are relative to the plot area like DrawingSurface expects.
    """
    marker_hovered = Signal(object)  # PointKey
    marker_unhovered = Signal(object)  # PointKey
    cursor_moved = Signal(float, float)  # valence, arousal

    def __init__(self, geometry: PlotGeometry | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent, background="w")
        self.geometry = geometry or PlotGeometry()
        g = self.geometry
        self._x_scale = g.x_scale()
        self._y_scale = g.y_scale()

        self.enableMouse(False)
        self.setAspectLocked(True)
        self.setRange(QRectF(0.0, 0.0, g.canvas_width, g.canvas_height), padding=0)
        self.setMinimumSize(int(g.canvas_width * 0.6), int(g.canvas_height * 0.6))

        self._root = QGraphicsRectItem(0.0, 0.0, g.width, g.height)
        self._root.setPen(QPen(Qt.PenStyle.NoPen))
        self._root.setPos(g.margins.left, g.margins.top)
        self.addItem(self._root)

        self.scene().sigMouseMoved.connect(self._on_mouse_moved)

    # ------------------------------------------------------------------------------
    # DrawingSurface
    # ------------------------------------------------------------------------------

    def create_marker(self, key: PointKey, x: float, y: float, style: MarkerStyle) -> MarkerItem:
        item = MarkerItem(key, style, self)
        item.setParentItem(self._root)
        item.setPos(x, y)
        return item

    def update_marker(
        self,
        handle: MarkerItem,
        *,
        radius: Optional[float] = None,
        opacity: Optional[float] = None,
        duration_ms: int = 0,
    ) -> None:
        handle.animate_to(
            radius if radius is not None else handle.radius,
            opacity if opacity is not None else handle.opacity(),
            duration_ms,
        )

    def remove_marker(self, handle: MarkerItem) -> None:
        handle.animate_to(handle.radius, handle.opacity(), 0)
        self.scene().removeItem(handle)

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
    ) -> QGraphicsSimpleTextItem:
        item = QGraphicsSimpleTextItem(text, self._root)
        font = QFont()
        font.setPixelSize(int(size))
        font.setBold(bold)
        item.setFont(font)
        item.setBrush(pg.mkBrush(color))

        rect = item.boundingRect()
        dx = {"start": 0.0, "end": rect.width()}.get(anchor, rect.width() / 2)
        dy = rect.height() / 2
        item.setTransformOriginPoint(dx, dy)
        item.setPos(x - dx, y - dy)
        item.setRotation(rotation)
        item.setZValue(1)
        return item

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
    ) -> QGraphicsLineItem:
        item = QGraphicsLineItem(x1, y1, x2, y2, self._root)
        style = Qt.PenStyle.DashLine if dashed else Qt.PenStyle.SolidLine
        item.setPen(pg.mkPen(color, width=width, style=style))
        item.setZValue(0)
        return item

    def clear(self) -> None:
        for child in self._root.childItems():
            self.scene().removeItem(child)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _on_mouse_moved(self, scene_pos: QPointF) -> None:
        local = self._root.mapFromScene(scene_pos)
        if not self._root.rect().contains(local):
            return
        self.cursor_moved.emit(self._x_scale.invert(local.x()), self._y_scale.invert(local.y()))
