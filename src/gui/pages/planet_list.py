"""
PlanetListPage — start page of the planetas GUI.

Shows every stored planet.  Activating a row opens the detail page; the
"Adicionar" button opens an empty form.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ Planetas                                │
  │ ┌─────────────────────────────────────┐ │
  │ │ Terra (Planeta Azul)                │ │
  │ │ Marte                               │ │
  │ └─────────────────────────────────────┘ │
  │                          [+ Adicionar]  │
  └─────────────────────────────────────────┘
"""

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from src.store.models import Planet

__all__ = ["PlanetListPage"]

logger = logging.getLogger(__name__)


class PlanetListPage(QWidget):
    """
    List of all planets.

    Signals emitted by this page (connected by MainWindow):
      • planet_activated(int) — user opened the planet with this id
    """

    planet_activated = pyqtSignal(int)

    def __init__(self, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        layout.addWidget(QLabel("<b>Planetas</b>"))

        self._empty_label = QLabel("Nenhum planeta cadastrado")
        layout.addWidget(self._empty_label)

        self._list_widget = QListWidget()
        self._list_widget.itemActivated.connect(self._on_item_activated)
        layout.addWidget(self._list_widget)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._add_btn = QPushButton("+ Adicionar")
        btn_row.addWidget(self._add_btn)
        layout.addLayout(btn_row)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        planet_id = item.data(Qt.ItemDataRole.UserRole)
        if planet_id is not None:
            self.planet_activated.emit(planet_id)

    # ── Public API ─────────────────────────────────────────────────────────

    def set_planets(self, planets: list[Planet]) -> None:
        """Re-render the list from *planets*."""
        self._list_widget.clear()
        for planet in planets:
            item = QListWidgetItem(str(planet))
            item.setData(Qt.ItemDataRole.UserRole, planet.id)
            self._list_widget.addItem(item)
        self._empty_label.setVisible(not planets)
