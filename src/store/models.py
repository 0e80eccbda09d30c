"""Data models for the store module."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

__all__ = ["Planet"]


@dataclass
class Planet:
    """
    One planet as stored in the ``planetas`` table.

    Fields
    ──────
    name              — planet name (column ``nome``)
    distance_from_sun — distance from the sun (column ``distancia_sol``)
    size              — planet size (column ``tamanho``)
    nickname          — optional nickname, None when absent (column ``apelido``)
    id                — SQLite row id (None until saved)
    """
    name:              str
    distance_from_sun: float
    size:              float
    nickname:          Optional[str] = None
    id:                Optional[int] = None

    def to_row(self) -> dict[str, Any]:
        """Column → value mapping; ``id`` is left out while unsaved."""
        row: dict[str, Any] = {
            "nome":          self.name,
            "distancia_sol": self.distance_from_sun,
            "tamanho":       self.size,
            "apelido":       self.nickname,
        }
        if self.id is not None:
            row["id"] = self.id
        return row

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Planet":
        """Build a Planet from a dict or sqlite3.Row."""
        keys = row.keys()
        return cls(
            id=row["id"] if "id" in keys else None,
            name=row["nome"],
            distance_from_sun=row["distancia_sol"],
            size=row["tamanho"],
            nickname=row["apelido"] if "apelido" in keys else None,
        )

    def __str__(self) -> str:
        if self.nickname:
            return f"{self.name} ({self.nickname})"
        return self.name
