"""
Scene Reconciler
================
Keeps the markers on a drawing surface in step with the visible point set.

Reconciliation is a keyed diff over Point.key = (word, category, level):
    exit  = previous - next  -> marker removed
    enter = next - previous  -> marker created
    both                     -> marker left untouched (no redraw, hover kept)

After each pass the rendered keys equal the keys of `next_visible`; anything
else is a programming fault and raises RenderStateError.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional, Sequence

from emotionmap.model.errors import RenderStateError
from emotionmap.model.points import Point, PointKey
from emotionmap.scene.palette import marker_style
from emotionmap.scene.scale import PlotGeometry
from emotionmap.scene.surface import DrawingSurface, Handle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconcileResult:
    entered: int = 0
    exited: int = 0
    retained: int = 0


class SceneReconciler:
    """Owns the RenderState: point key -> marker handle currently drawn."""

    def __init__(self, geometry: PlotGeometry | None = None) -> None:
        self.geometry = geometry or PlotGeometry()
        self.x_scale = self.geometry.x_scale()
        self.y_scale = self.geometry.y_scale()
        self._handles: dict[PointKey, Handle] = {}
        self._points: dict[PointKey, Point] = {}

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def reconcile(
        self,
        previous_visible: Sequence[Point],
        next_visible: Sequence[Point],
        surface: DrawingSurface,
    ) -> ReconcileResult:
        """Apply the enter/exit difference between two visible sets to the surface."""
        previous_keys = {p.key for p in previous_visible}
        next_keys = {p.key for p in next_visible}

        exited = 0
        for point in previous_visible:
            if point.key in next_keys:
                continue
            handle = self._handles.pop(point.key, None)
            if handle is None:
                raise RenderStateError(f"No marker drawn for exiting point {point.key}")
            self._points.pop(point.key, None)
            surface.remove_marker(handle)
            exited += 1

        entered = 0
        for point in next_visible:
            if point.key in previous_keys:
                continue
            if point.key in self._handles:
                raise RenderStateError(f"Marker already drawn for entering point {point.key}")
            self._handles[point.key] = surface.create_marker(
                point.key,
                self.x_scale(point.x),
                self.y_scale(point.y),
                marker_style(point.category),
            )
            self._points[point.key] = point
            entered += 1

        self._check(next_keys)
        result = ReconcileResult(entered=entered, exited=exited, retained=len(next_keys) - entered)
        logger.debug(f"Reconciled scene: {result}")
        return result

    def clear(self, surface: DrawingSurface) -> int:
        """Remove every marker, e.g. before installing a new dataset."""
        removed = len(self._handles)
        for handle in self._handles.values():
            surface.remove_marker(handle)
        self._handles.clear()
        self._points.clear()
        return removed

    def keys(self) -> frozenset[PointKey]:
        return frozenset(self._handles)

    def handle_for(self, key: PointKey) -> Optional[Handle]:
        return self._handles.get(key)

    def point_for(self, key: PointKey) -> Optional[Point]:
        return self._points.get(key)

    def __contains__(self, key: PointKey) -> bool:
        return key in self._handles

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _check(self, expected: Iterable[PointKey]) -> None:
        expected = set(expected)
        if set(self._handles) != expected:
            missing = expected - set(self._handles)
            orphaned = set(self._handles) - expected
            raise RenderStateError(
                f"Render state out of sync: {len(missing)} missing, {len(orphaned)} orphaned markers"
            )
