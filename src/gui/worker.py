"""
StoreWorker — runs one PlanetListViewModel operation in a background thread.

Usage (MainWindow)::

    self._thread = QThread()
    self._worker = StoreWorker(self._model.add, planet)
    self._worker.moveToThread(self._thread)
    self._thread.started.connect(self._worker.run)
    self._worker.finished.connect(self._thread.quit)
    self._worker.failed.connect(self._thread.quit)
    self._worker.failed.connect(self._show_error)
    self._thread.start()

Signals
───────
finished(object) — the operation's return value (new id / rows affected)
failed(str)      — human-readable error message
"""

import logging
from typing import Any, Callable

from PyQt6.QtCore import QObject, pyqtSignal

__all__ = ["StoreWorker"]

logger = logging.getLogger(__name__)


class StoreWorker(QObject):
    """
    Wraps a single store-backed call for execution in a QThread.

    All interaction with the GUI must go through signals — never touch
    Qt widgets from inside run().
    """

    finished = pyqtSignal(object)  # operation result
    failed   = pyqtSignal(str)     # error message

    def __init__(self, operation: Callable[..., Any], *args: Any) -> None:
        super().__init__()
        self._operation = operation
        self._args      = args

    def run(self) -> None:
        """Entry point — connect QThread.started to this slot."""
        try:
            result = self._operation(*self._args)
        except Exception as exc:  # noqa: BLE001
            logger.exception("StoreWorker.run() failed")
            self.failed.emit(str(exc))
            return
        self.finished.emit(result)
