"""
PlanetDetailPage — read-only view of one planet with edit / delete actions.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ Marte                                   │
  │ Distância do Sol:  1.52                 │
  │ Tamanho:           6779                 │
  │ Apelido:           Planeta Vermelho     │
  │        [Editar] [Excluir] [← Voltar]    │
  └─────────────────────────────────────────┘
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from src.gui.viewmodels import format_number
from src.store.models import Planet

__all__ = ["PlanetDetailPage"]

logger = logging.getLogger(__name__)


class PlanetDetailPage(QWidget):
    """Shows the fields of the selected planet."""

    def __init__(self, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._planet: Optional[Planet] = None
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        self._title = QLabel()
        layout.addWidget(self._title)

        form = QFormLayout()
        self._distance_label = QLabel()
        self._size_label     = QLabel()
        self._nickname_label = QLabel()
        form.addRow("Distância do Sol:", self._distance_label)
        form.addRow("Tamanho:", self._size_label)
        form.addRow("Apelido:", self._nickname_label)
        layout.addLayout(form)
        layout.addStretch()

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._edit_btn   = QPushButton("Editar")
        self._delete_btn = QPushButton("Excluir")
        self._back_btn   = QPushButton("← Voltar")
        btn_row.addWidget(self._edit_btn)
        btn_row.addWidget(self._delete_btn)
        btn_row.addWidget(self._back_btn)
        layout.addLayout(btn_row)

    # ── Public API ─────────────────────────────────────────────────────────

    @property
    def planet(self) -> Optional[Planet]:
        return self._planet

    def show_planet(self, planet: Planet) -> None:
        """Fill the labels from *planet*."""
        self._planet = planet
        self._title.setText(f"<b>{planet.name}</b>")
        self._distance_label.setText(format_number(planet.distance_from_sun))
        self._size_label.setText(format_number(planet.size))
        self._nickname_label.setText(planet.nickname or "—")
