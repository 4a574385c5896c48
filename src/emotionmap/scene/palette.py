"""Colours, marker styles and quadrant definitions of the emotion chart."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Optional

COLOR_MAP: dict[str, str] = {
    "快乐": "#FF6B6B",
    "关心": "#4ECDC4",
    "自信": "#45B7D1",
    "高能量": "#96CEB4",
    "低能量": "#FFEAA7",
    "脆弱": "#DDA0DD",
    "冷漠": "#A9A9A9",
    "害怕": "#FFA726",
    "悲伤": "#6A5ACD",
    "愤怒": "#FF5252",
    "困惑": "#26C6DA",
}

DEFAULT_RADIUS: float = 6.0
DEFAULT_OPACITY: float = 0.8
HIGHLIGHT_RADIUS: float = 10.0
HIGHLIGHT_OPACITY: float = 1.0
TRANSITION_MS: int = 200

GUIDE_COLOR = "#999"
ORIGIN_LABEL_COLOR = "#666"


def category_color(category: str) -> Optional[str]:
    """Fill colour of a category. Unknown categories have no fill."""
    return COLOR_MAP.get(category)


@dataclass(frozen=True)
class MarkerStyle:
    radius: float = DEFAULT_RADIUS
    fill: Optional[str] = None
    opacity: float = DEFAULT_OPACITY
    stroke: str = "#fff"
    stroke_width: float = 1.5


def marker_style(category: str) -> MarkerStyle:
    return replace(MarkerStyle(), fill=category_color(category))


class Quadrant(StrEnum):
    HIGH_VALENCE_HIGH_AROUSAL = "高愉悦/高唤醒"
    LOW_VALENCE_HIGH_AROUSAL = "低愉悦/高唤醒"
    LOW_VALENCE_LOW_AROUSAL = "低愉悦/低唤醒"
    HIGH_VALENCE_LOW_AROUSAL = "高愉悦/低唤醒"

    @classmethod
    def of(cls, x: float, y: float) -> Quadrant:
        """Quadrant of a coordinate; zero counts as the low side."""
        if y > 0:
            return cls.HIGH_VALENCE_HIGH_AROUSAL if x > 0 else cls.LOW_VALENCE_HIGH_AROUSAL
        return cls.HIGH_VALENCE_LOW_AROUSAL if x > 0 else cls.LOW_VALENCE_LOW_AROUSAL


@dataclass(frozen=True)
class QuadrantLabel:
    quadrant: Quadrant
    color: str
    # Position as a fraction of the plot area
    fx: float
    fy: float


QUADRANT_LABELS: tuple[QuadrantLabel, ...] = (
    QuadrantLabel(Quadrant.HIGH_VALENCE_HIGH_AROUSAL, "#2E7D32", 0.75, 0.25),
    QuadrantLabel(Quadrant.LOW_VALENCE_HIGH_AROUSAL, "#C62828", 0.25, 0.25),
    QuadrantLabel(Quadrant.LOW_VALENCE_LOW_AROUSAL, "#6A1B9A", 0.25, 0.75),
    QuadrantLabel(Quadrant.HIGH_VALENCE_LOW_AROUSAL, "#1565C0", 0.75, 0.75),
)
