"""
Point Store
===========
Flattens validated category groups into one Point per word and keeps the
current collection.

The whole collection is swapped in a single assignment on reload, so readers
either see the previous dataset or the new one, never a mix.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional

from emotionmap.model.dataset import CategoryGroup
from emotionmap.model.errors import DuplicateKeyError

logger = logging.getLogger(__name__)

PointKey = tuple[str, str, str]


@dataclass(frozen=True)
class Point:
    word: str
    category: str
    level: str
    coord: tuple[float, float]

    @property
    def key(self) -> PointKey:
        """Identity used to match the point across renders."""
        return self.word, self.category, self.level

    @property
    def x(self) -> float:
        return self.coord[0]

    @property
    def y(self) -> float:
        return self.coord[1]


@dataclass(frozen=True)
class DatasetStats:
    categories: int = 0
    levels: int = 0
    words: int = 0

    def describe(self) -> str:
        return f"数据统计：{self.categories}个类别，{self.levels}个等级，{self.words}个词汇"


def flatten(groups: Iterable[CategoryGroup]) -> tuple[Point, ...]:
    """One Point per word, groups in order, words in order within a group."""
    points: list[Point] = []
    seen: set[PointKey] = set()
    for group in groups:
        for entry in group.words:
            point = Point(
                word=entry.word,
                category=group.category,
                level=group.level,
                coord=entry.coord,
            )
            if point.key in seen:
                raise DuplicateKeyError(f"Duplicate point key {point.key}", key=point.key)
            seen.add(point.key)
            points.append(point)
    return tuple(points)


def _distinct(values: Iterable[str]) -> tuple[str, ...]:
    # dict keeps first-seen order
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True)
class _Snapshot:
    points: tuple[Point, ...] = ()
    categories: tuple[str, ...] = ()
    levels: tuple[str, ...] = ()
    index: Optional[dict[PointKey, Point]] = None


class PointStore:
    """Holds the flattened points of the active dataset."""

    def __init__(self, groups: Iterable[CategoryGroup] = ()) -> None:
        self._snapshot = _Snapshot()
        self.replace(groups)

    def replace(self, groups: Iterable[CategoryGroup]) -> None:
        """Swap the whole backing dataset."""
        points = flatten(groups)
        self._snapshot = _Snapshot(
            points=points,
            categories=_distinct(p.category for p in points),
            levels=_distinct(p.level for p in points),
            index={p.key: p for p in points},
        )
        logger.debug(f"Point store now holds {len(points)} points.")

    @property
    def points(self) -> tuple[Point, ...]:
        return self._snapshot.points

    def categories(self) -> tuple[str, ...]:
        return self._snapshot.categories

    def levels(self) -> tuple[str, ...]:
        return self._snapshot.levels

    def get(self, key: PointKey) -> Optional[Point]:
        return self._snapshot.index.get(key)

    def stats(self) -> DatasetStats:
        snap = self._snapshot
        return DatasetStats(
            categories=len(snap.categories),
            levels=len(snap.levels),
            words=len(snap.points),
        )

    def __len__(self) -> int:
        return len(self._snapshot.points)
