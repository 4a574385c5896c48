from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal, Slot

from emotionmap.controller.workers import DatasetWorker
from emotionmap.model.errors import EmotionMapError
from emotionmap.model.loader import FALLBACK_GROUPS, LoadOutcome
from emotionmap.model.points import PointStore
from emotionmap.model.state import AppState

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store with signals for panel/chart sync."""
    loading_changed = Signal(bool)
    dataset_changed = Signal(object)  # Transition
    visible_changed = Signal(object)  # Transition
    message_raised = Signal(str)

    def __init__(
        self,
        state: Optional[AppState] = None,
        worker_factory: Callable[[str], DatasetWorker] = DatasetWorker,
    ) -> None:
        super().__init__()
        self.state = state or AppState()
        self._worker_factory = worker_factory
        # Workers whose thread has not finished yet
        self._workers: list[DatasetWorker] = []
        self._source: str = ""

    @property
    def points(self) -> PointStore:
        return self.state.points

    def is_loading(self) -> bool:
        return self.state.loading

    def counts(self) -> tuple[int, int]:
        return self.state.counts()

    def active_workers(self) -> int:
        return len(self._workers)

    def load(self, source: str) -> bool:
        """Start loading `source` in the background. Dropped while a load is in flight."""
        if not self.state.begin_load():
            return False
        self._source = source
        self.loading_changed.emit(True)

        worker = self._worker_factory(source)
        worker.loaded.connect(self.apply_outcome)
        worker.error_occurred.connect(self._on_worker_error)
        worker.finished.connect(lambda: self._release(worker))
        # keep a reference so the thread object outlives run()
        self._workers.append(worker)
        worker.start()
        return True

    def shutdown(self) -> None:
        """Block until every started load thread has returned."""
        for worker in list(self._workers):
            worker.wait()
        self._workers.clear()

    def _release(self, worker: DatasetWorker) -> None:
        if worker in self._workers:
            self._workers.remove(worker)

    @Slot(object)
    def apply_outcome(self, outcome: LoadOutcome) -> None:
        transition = self.state.finish_load(outcome)
        for message in outcome.messages():
            self.message_raised.emit(message)
        self.dataset_changed.emit(transition)
        self.loading_changed.emit(False)

    @Slot(str)
    def _on_worker_error(self, message: str) -> None:
        logger.error(f"Dataset worker failed: {message}")
        self.apply_outcome(
            LoadOutcome(groups=FALLBACK_GROUPS, source=self._source, error=EmotionMapError(message))
        )

    def set_category(self, value: str) -> None:
        self.visible_changed.emit(self.state.select_category(value))

    def set_level(self, value: str) -> None:
        self.visible_changed.emit(self.state.select_level(value))
