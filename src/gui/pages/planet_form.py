"""
PlanetFormPage — add / edit form for a planet.

Invalid input is reported next to the offending field and submitted()
is not emitted, so nothing reaches the store.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ Adicionar Planeta                       │
  │ Nome:             [_________________]   │
  │ Distância do Sol: [_________________]   │
  │                   Informe uma distância │
  │ Tamanho:          [_________________]   │
  │ Apelido:          [_________________]   │
  │                   [Cancelar] [Salvar]   │
  └─────────────────────────────────────────┘
"""

import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from src.gui.viewmodels import (
    FIELD_DISTANCE,
    FIELD_NAME,
    FIELD_SIZE,
    PlanetFormViewModel,
)
from src.store.models import Planet

__all__ = ["PlanetFormPage"]

logger = logging.getLogger(__name__)


class PlanetFormPage(QWidget):
    """
    Form used both for new planets and for editing an existing one.

    Signals emitted by this page (connected by MainWindow):
      • submitted(Planet) — the form validated; id is None when adding
    """

    submitted = pyqtSignal(object)

    def __init__(self, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = PlanetFormViewModel()
        self._error_labels: dict[str, QLabel] = {}
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        self._title = QLabel("<b>Adicionar Planeta</b>")
        layout.addWidget(self._title)

        form = QFormLayout()
        self._name_edit     = QLineEdit()
        self._distance_edit = QLineEdit()
        self._size_edit     = QLineEdit()
        self._nickname_edit = QLineEdit()
        self._distance_edit.setPlaceholderText("ex.: 1.52")
        self._nickname_edit.setPlaceholderText("opcional")

        self._name_edit.textChanged.connect(lambda t: setattr(self._vm, "name", t))
        self._distance_edit.textChanged.connect(lambda t: setattr(self._vm, "distance_text", t))
        self._size_edit.textChanged.connect(lambda t: setattr(self._vm, "size_text", t))
        self._nickname_edit.textChanged.connect(lambda t: setattr(self._vm, "nickname", t))

        for label, edit, field in (
            ("Nome:",             self._name_edit,     FIELD_NAME),
            ("Distância do Sol:", self._distance_edit, FIELD_DISTANCE),
            ("Tamanho:",          self._size_edit,     FIELD_SIZE),
        ):
            form.addRow(label, edit)
            error = QLabel()
            error.setStyleSheet("color: #c0392b;")
            error.setVisible(False)
            self._error_labels[field] = error
            form.addRow("", error)
        form.addRow("Apelido:", self._nickname_edit)
        layout.addLayout(form)
        layout.addStretch()

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._cancel_btn = QPushButton("Cancelar")
        self._save_btn   = QPushButton("Salvar")
        self._save_btn.clicked.connect(self._on_save)
        btn_row.addWidget(self._cancel_btn)
        btn_row.addWidget(self._save_btn)
        layout.addLayout(btn_row)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_save(self) -> None:
        errors = self._vm.validate()
        for field, label in self._error_labels.items():
            message = errors.get(field, "")
            label.setText(message)
            label.setVisible(bool(message))
        if errors:
            logger.debug("Form rejected: %s", sorted(errors))
            return
        self.submitted.emit(self._vm.to_planet())

    # ── Public API ─────────────────────────────────────────────────────────

    def start_add(self) -> None:
        """Show an empty form for a new planet."""
        self._vm.clear()
        self._title.setText("<b>Adicionar Planeta</b>")
        self._sync_edits()

    def start_edit(self, planet: Planet) -> None:
        """Show the form pre-filled with *planet*."""
        self._vm.from_planet(planet)
        self._title.setText("<b>Editar Planeta</b>")
        self._sync_edits()

    def _sync_edits(self) -> None:
        # Copy first: setText fires textChanged, which writes back into the vm
        name, distance, size, nickname = (
            self._vm.name, self._vm.distance_text, self._vm.size_text, self._vm.nickname
        )
        self._name_edit.setText(name)
        self._distance_edit.setText(distance)
        self._size_edit.setText(size)
        self._nickname_edit.setText(nickname)
        for label in self._error_labels.values():
            label.clear()
            label.setVisible(False)
