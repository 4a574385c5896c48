"""
Background Workers (Threading)
==============================
QThread subclasses for the one blocking task of the viewer: reading the
dataset document.

The worker only fetches, parses and validates. The resulting LoadOutcome is
delivered to the GUI thread through a queued signal, and the store installs it
there, so the point collection is never touched from a background thread.

Classes:
    DatasetWorker: Runs load_dataset() off the GUI thread.
"""
import logging

from PySide6.QtCore import QThread, Signal

from emotionmap.config import FETCH_TIMEOUT_S
from emotionmap.model.loader import load_dataset

logger = logging.getLogger(__name__)


class DatasetWorker(QThread):
    # Signals to update the UI from the background
    loaded = Signal(object)  # LoadOutcome
    error_occurred = Signal(str)

    def __init__(self, source: str, timeout: float = FETCH_TIMEOUT_S) -> None:
        super().__init__()
        self.source = source
        self.timeout = timeout

    def run(self) -> None:
        try:
            logger.info("Loading dataset in background thread...")
            outcome = load_dataset(self.source, timeout=self.timeout)
            self.loaded.emit(outcome)
        except Exception as e:
            # load_dataset handles every expected failure; this is a bug
            logger.exception(f"Error in DatasetWorker: {e}")
            self.error_occurred.emit(str(e))
