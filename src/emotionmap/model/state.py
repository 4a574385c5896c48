"""
Application State (Data Model)
==============================
This module defines the central data structure for the running application.

It holds the current dataset, the filter selection and the visible subset in
one place. Views read from this object; the store (app.state.Store) writes to
it and broadcasts the changes.

Classes:
    Transition: Visible subset before and after a change.
    AppState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from emotionmap.model.filters import FilterState
from emotionmap.model.loader import LoadOutcome
from emotionmap.model.points import Point, PointStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    previous: tuple[Point, ...]
    current: tuple[Point, ...]

    @property
    def changed(self) -> bool:
        return [p.key for p in self.previous] != [p.key for p in self.current]


@dataclass
class AppState:
    """
    Singleton-like class that holds the state of the viewer.
    Constructed once at startup; the dataset is replaced atomically on reload.
    """
    points: PointStore = field(default_factory=PointStore)
    filters: FilterState = field(default_factory=FilterState)
    visible: tuple[Point, ...] = ()
    loading: bool = False
    last_outcome: Optional[LoadOutcome] = None

    def begin_load(self) -> bool:
        """Mark a load as in flight. Returns False if one already is."""
        if self.loading:
            logger.info("Load already in progress, request dropped.")
            return False
        self.loading = True
        return True

    def finish_load(self, outcome: LoadOutcome) -> Transition:
        """Install the loaded dataset and reset the selection."""
        previous = self.visible
        self.points.replace(outcome.groups)
        self.filters.reset()
        self.visible = self.filters.visible(self.points.points)
        self.last_outcome = outcome
        self.loading = False
        logger.info(f"Dataset installed: {self.points.stats().describe()}")
        return Transition(previous=previous, current=self.visible)

    def select_category(self, value: str) -> Transition:
        self.filters.set_category(value)
        return self._refresh()

    def select_level(self, value: str) -> Transition:
        self.filters.set_level(value)
        return self._refresh()

    def counts(self) -> tuple[int, int]:
        """(total, visible) point counts."""
        return len(self.points), len(self.visible)

    def _refresh(self) -> Transition:
        previous = self.visible
        self.visible = self.filters.visible(self.points.points)
        return Transition(previous=previous, current=self.visible)
