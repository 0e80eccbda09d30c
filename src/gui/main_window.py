"""
MainWindow — top-level application window for the planetas GUI.

Uses a QStackedWidget to host three pages:
  0  PlanetListPage    — every stored planet
  1  PlanetDetailPage  — one planet, with edit / delete
  2  PlanetFormPage    — add or edit form

Store-backed operations run on a QThread through StoreWorker; the list
model's change notifications are re-emitted as a Qt signal so the pages
are only ever touched from the UI thread.
"""

import logging
from typing import Any, Callable

from PyQt6.QtCore import QThread, pyqtSignal
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QMainWindow,
    QMessageBox,
    QStackedWidget,
    QWidget,
)

from src.exceptions import StoreError
from src.gui.pages.planet_detail import PlanetDetailPage
from src.gui.pages.planet_form import PlanetFormPage
from src.gui.pages.planet_list import PlanetListPage
from src.gui.viewmodels import PlanetListViewModel
from src.gui.worker import StoreWorker
from src.store.db import DEFAULT_DB_PATH, PlanetStore
from src.store.models import Planet

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)

# Page indices — keep in sync with the order they are added to the stack
PAGE_LIST   = 0
PAGE_DETAIL = 1
PAGE_FORM   = 2


class MainWindow(QMainWindow):
    """Root window: owns the store and list model, wires page navigation."""

    planets_changed = pyqtSignal(object)  # list[Planet], emitted from any thread

    def __init__(self, db_path: str = DEFAULT_DB_PATH, parent: QWidget = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Planetas")
        self.resize(480, 560)

        self._store = PlanetStore(db_path)
        self._model = PlanetListViewModel(self._store)

        # Running (thread, worker) pairs — kept to prevent premature GC
        self._jobs: list[tuple[QThread, StoreWorker]] = []

        self._build_ui()
        self._connect_navigation()

        self.planets_changed.connect(self._on_planets_changed)
        self._model.subscribe(self.planets_changed.emit)

        try:
            self._model.load()
        except StoreError as exc:
            logger.error("Initial load failed: %s", exc)
            self._show_error(str(exc))

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._page_list   = PlanetListPage()
        self._page_detail = PlanetDetailPage()
        self._page_form   = PlanetFormPage()

        self._stack.addWidget(self._page_list)    # 0
        self._stack.addWidget(self._page_detail)  # 1
        self._stack.addWidget(self._page_form)    # 2

        self._stack.setCurrentIndex(PAGE_LIST)

    # ── Navigation wiring ──────────────────────────────────────────────────

    def _connect_navigation(self) -> None:
        self._page_list._add_btn.clicked.connect(self._on_add_clicked)
        self._page_list.planet_activated.connect(self.open_planet)

        self._page_detail._back_btn.clicked.connect(lambda: self.go_to(PAGE_LIST))
        self._page_detail._edit_btn.clicked.connect(self._on_edit_clicked)
        self._page_detail._delete_btn.clicked.connect(self._on_delete_clicked)

        self._page_form._cancel_btn.clicked.connect(lambda: self.go_to(PAGE_LIST))
        self._page_form.submitted.connect(self._on_form_submitted)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_planets_changed(self, planets: list[Planet]) -> None:
        self._page_list.set_planets(planets)
        shown = self._page_detail.planet
        if shown is not None and shown.id is not None:
            fresh = self._model.get(shown.id)
            if fresh is not None:
                self._page_detail.show_planet(fresh)
            elif self._stack.currentIndex() == PAGE_DETAIL:
                self.go_to(PAGE_LIST)

    def _on_add_clicked(self) -> None:
        self._page_form.start_add()
        self.go_to(PAGE_FORM)

    def _on_edit_clicked(self) -> None:
        planet = self._page_detail.planet
        if planet is None:
            return
        self._page_form.start_edit(planet)
        self.go_to(PAGE_FORM)

    def _on_delete_clicked(self) -> None:
        planet = self._page_detail.planet
        if planet is None or planet.id is None:
            return
        self._run_async(self._model.remove, planet.id)

    def _on_form_submitted(self, planet: Planet) -> None:
        operation = self._model.add if planet.id is None else self._model.update_record
        self._run_async(operation, planet)

    def _on_job_finished(self, result: Any) -> None:
        """Called when a worker emits finished(result); back to the list."""
        logger.debug("Store operation finished: %r", result)
        self.go_to(PAGE_LIST)

    def _reap_jobs(self) -> None:
        self._jobs = [(t, w) for t, w in self._jobs if not t.isFinished()]

    # ── Background operations ──────────────────────────────────────────────

    def _run_async(self, operation: Callable[..., Any], *args: Any) -> None:
        """Run ``operation(*args)`` on a worker thread."""
        thread = QThread()
        worker = StoreWorker(operation, *args)
        worker.moveToThread(thread)

        # Bound MainWindow slots so results are delivered on the UI thread
        thread.started.connect(worker.run)
        worker.finished.connect(self._on_job_finished)
        worker.failed.connect(self._show_error)
        worker.finished.connect(thread.quit)
        worker.failed.connect(thread.quit)
        thread.finished.connect(self._reap_jobs)

        self._jobs.append((thread, worker))
        thread.start()

    def _show_error(self, message: str) -> None:
        logger.warning("Operation failed: %s", message)
        QMessageBox.warning(self, "Erro", "Não foi possível concluir a operação.")

    # ── Public API ─────────────────────────────────────────────────────────

    @property
    def model(self) -> PlanetListViewModel:
        return self._model

    def open_planet(self, planet_id: int) -> None:
        """Show the detail page for *planet_id*."""
        planet = self._model.get(planet_id)
        if planet is None:
            return
        self._page_detail.show_planet(planet)
        self.go_to(PAGE_DETAIL)

    def go_to(self, page_index: int) -> None:
        """Switch the visible page to *page_index*."""
        self._stack.setCurrentIndex(page_index)

    def closeEvent(self, event: QCloseEvent) -> None:
        for thread, _worker in list(self._jobs):
            thread.quit()
            thread.wait(3000)  # wait up to 3s
        self._store.close()
        super().closeEvent(event)
