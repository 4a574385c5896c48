"""
Filter State
============
The category and intensity-level selection applied to the point collection.

Both filters default to ALL. A point is visible when it matches both, and the
visible subset keeps the order of the point collection.

Classes:
    FilterSelection: Immutable (category, level) pair.
    FilterState: The current selection and its setters.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Iterable

from emotionmap.model.points import Point

logger = logging.getLogger(__name__)

ALL = "all"


@dataclass(frozen=True)
class FilterSelection:
    category: str = ALL
    level: str = ALL

    def matches(self, point: Point) -> bool:
        return (
            (self.category == ALL or point.category == self.category)
            and (self.level == ALL or point.level == self.level)
        )


def options(values: Iterable[str]) -> tuple[str, ...]:
    """Selectable values for a filter: the wildcard followed by the known values."""
    return (ALL, *values)


class FilterState:
    """
    Current category/level selection.

    Values outside the known sets are accepted as-is and simply match no
    point; option producers are expected to offer known values only.
    """

    def __init__(self) -> None:
        self.selection = FilterSelection()

    def set_category(self, value: str) -> FilterSelection:
        self.selection = replace(self.selection, category=value)
        logger.debug(f"Category filter set to '{value}'.")
        return self.selection

    def set_level(self, value: str) -> FilterSelection:
        self.selection = replace(self.selection, level=value)
        logger.debug(f"Level filter set to '{value}'.")
        return self.selection

    def reset(self) -> None:
        self.selection = FilterSelection()

    def visible(self, points: Iterable[Point]) -> tuple[Point, ...]:
        selection = self.selection
        return tuple(p for p in points if selection.matches(p))
