"""
store — SQLite-backed persistence layer for planet records.

Public API
──────────
Planet       — dataclass representing one planet row
PlanetStore  — CRUD interface (create, read_all, update, delete)
"""

from src.store.models import Planet
from src.store.db import PlanetStore

__all__ = ["Planet", "PlanetStore"]
