"""
Project-wide custom exception hierarchy.
All modules raise subclasses of PlanetasBaseError — never bare Exception.
"""

__all__ = [
    "PlanetasBaseError",
    "StoreError",
    "SchemaVersionError",
    "ValidationError",
]


class PlanetasBaseError(Exception):
    """Root exception for all planetas errors."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(PlanetasBaseError):
    """Raised on SQLite / store I/O errors."""


class SchemaVersionError(StoreError):
    """Raised when the database file carries a schema version we cannot migrate."""


# ── Form validation ───────────────────────────────────────────────────────────

class ValidationError(PlanetasBaseError):
    """
    Raised when form input cannot be turned into a Planet.

    ``errors`` maps field name → human-readable message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"invalid fields: {fields}")
