"""
Interaction Controller
======================
Turns hover/unhover events on rendered markers into highlight changes and a
detail payload for the inspection panel.

At most one marker is enlarged at a time: hovering a new marker restores the
previous one first. Hovering the enlarged marker again, or unhovering a marker
that is not enlarged, does nothing.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from emotionmap.model.points import Point, PointKey
from emotionmap.scene.palette import (
    DEFAULT_OPACITY, DEFAULT_RADIUS, HIGHLIGHT_OPACITY, HIGHLIGHT_RADIUS, TRANSITION_MS, Quadrant,
)
from emotionmap.scene.reconciler import SceneReconciler
from emotionmap.scene.surface import DrawingSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetailPayload:
    word: str
    category: str
    level: str
    coord: tuple[float, float]
    valence_sign: str
    arousal_sign: str
    quadrant: Quadrant

    @classmethod
    def from_point(cls, point: Point) -> DetailPayload:
        x, y = point.coord
        return cls(
            word=point.word,
            category=point.category,
            level=point.level,
            coord=point.coord,
            valence_sign="positive" if x > 0 else "negative",
            arousal_sign="high" if y > 0 else "low",
            quadrant=Quadrant.of(x, y),
        )


@dataclass(frozen=True)
class HighlightCommand:
    """
    What a hover event changed.

    restore: key returned to the default look, if any.
    enlarge: key that became highlighted, if any.
    detail: payload now to display; None together with clear_detail=True
        means the detail view must be emptied.
    """
    restore: Optional[PointKey] = None
    enlarge: Optional[PointKey] = None
    detail: Optional[DetailPayload] = None
    clear_detail: bool = False

    @property
    def is_noop(self) -> bool:
        return (
            self.restore is None
            and self.enlarge is None
            and self.detail is None
            and not self.clear_detail
        )


def format_detail(payload: DetailPayload) -> str:
    """Multi-line tooltip text for a hovered point."""
    x, y = payload.coord
    return "\n".join([
        payload.word,
        f"类别: {payload.category}",
        f"强度: {payload.level}",
        f"坐标: [{x:.2f}, {y:.2f}]",
        f"愉悦度: {'正面' if payload.valence_sign == 'positive' else '负面'}",
        f"唤醒度: {'高唤醒' if payload.arousal_sign == 'high' else '低唤醒'}",
        f"象限: {payload.quadrant}",
    ])


class InteractionController:

    def __init__(self, reconciler: SceneReconciler, surface: DrawingSurface) -> None:
        self.reconciler = reconciler
        self.surface = surface
        self._enlarged: Optional[PointKey] = None
        self.detail: Optional[DetailPayload] = None

    @property
    def enlarged(self) -> Optional[PointKey]:
        return self._enlarged

    def on_hover(self, key: PointKey) -> HighlightCommand:
        if key == self._enlarged:
            return HighlightCommand()
        point = self.reconciler.point_for(key)
        if point is None:
            logger.debug(f"Hover on unknown marker {key} ignored.")
            return HighlightCommand()

        restored = self._restore_current()
        self._apply(key, HIGHLIGHT_RADIUS, HIGHLIGHT_OPACITY)
        self._enlarged = key
        self.detail = DetailPayload.from_point(point)
        return HighlightCommand(restore=restored, enlarge=key, detail=self.detail)

    def on_unhover(self, key: PointKey) -> HighlightCommand:
        if key != self._enlarged:
            return HighlightCommand()
        restored = self._restore_current()
        self.detail = None
        return HighlightCommand(restore=restored, clear_detail=True)

    def sync(self) -> HighlightCommand:
        """Forget the highlighted marker if the last reconciliation removed it."""
        if self._enlarged is None or self._enlarged in self.reconciler:
            return HighlightCommand()
        logger.debug(f"Highlighted marker {self._enlarged} left the scene.")
        self._enlarged = None
        self.detail = None
        return HighlightCommand(clear_detail=True)

    def reset(self) -> None:
        """Drop the highlight state without touching the surface (scene was cleared)."""
        self._enlarged = None
        self.detail = None

    def _restore_current(self) -> Optional[PointKey]:
        previous = self._enlarged
        if previous is None:
            return None
        self._apply(previous, DEFAULT_RADIUS, DEFAULT_OPACITY)
        self._enlarged = None
        return previous

    def _apply(self, key: PointKey, radius: float, opacity: float) -> None:
        handle = self.reconciler.handle_for(key)
        if handle is None:
            return
        self.surface.update_marker(handle, radius=radius, opacity=opacity, duration_ms=TRANSITION_MS)
