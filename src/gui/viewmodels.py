"""
GUI ViewModels — pure-Python observable state containers.

No Qt imports here; every class is testable without a display.
Qt widgets subscribe to these objects and update themselves in response to
state changes.  (Hopping back onto the UI thread is handled by the Qt layer,
not here.)

Public API
──────────
PlanetListViewModel  — observable list of every stored planet
PlanetFormViewModel  — add/edit form state + input validation
parse_positive_float — parse "1,5" / "1.5" style input, must be > 0
"""

import logging
import math
import threading
from typing import Callable, Optional

from src.exceptions import ValidationError
from src.store.db import PlanetStore
from src.store.models import Planet

__all__ = [
    "PlanetListViewModel",
    "PlanetFormViewModel",
    "parse_positive_float",
    "format_number",
]

logger = logging.getLogger(__name__)

Listener = Callable[[list[Planet]], None]


# ── PlanetListViewModel ────────────────────────────────────────────────────────

class PlanetListViewModel:
    """
    In-memory copy of the ``planetas`` table, reloaded after every change.

    Every mutating call goes to the store first and then reloads the full
    list; there is no local patching.  load/add/update_record/remove are
    mutually exclusive per instance: the lock is held from the store call
    through the reload and listener notification, so once a call returns,
    listeners have seen the store's content as of that call.

    Store errors propagate to the caller and leave ``records`` untouched.
    """

    def __init__(self, store: PlanetStore) -> None:
        self._store = store
        self._records: list[Planet] = []
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()
        # Separate from _lock so a listener may unsubscribe while being notified
        self._listeners_lock = threading.Lock()

    @property
    def records(self) -> list[Planet]:
        """Snapshot of the current list."""
        return list(self._records)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call *listener(records)* after every reload.

        Returns:
            A zero-argument function that removes the listener again.
        """
        with self._listeners_lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._listeners_lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def get(self, planet_id: int) -> Optional[Planet]:
        """Return the planet with *planet_id* from the current list, or None."""
        for planet in self._records:
            if planet.id == planet_id:
                return planet
        return None

    # ── Store-backed operations ────────────────────────────────────────────

    def load(self) -> list[Planet]:
        """Replace the list with the store's full content and notify listeners."""
        with self._lock:
            return self._reload()

    def add(self, planet: Planet) -> int:
        """Insert *planet*, reload; returns the new id."""
        with self._lock:
            new_id = self._store.create(planet)
            self._reload()
        logger.info("Added planet %r (id=%d)", planet.name, new_id)
        return new_id

    def update_record(self, planet: Planet) -> int:
        """Replace the stored row for ``planet.id``, reload; returns rows affected."""
        with self._lock:
            count = self._store.update(planet)
            self._reload()
        if count == 0:
            logger.warning("Update skipped: no planet with id=%s", planet.id)
        return count

    def remove(self, planet_id: int) -> int:
        """Delete *planet_id*, reload; returns rows affected."""
        with self._lock:
            count = self._store.delete(planet_id)
            self._reload()
        if count == 0:
            logger.warning("Delete skipped: no planet with id=%s", planet_id)
        return count

    # ── Internal helpers ───────────────────────────────────────────────────

    def _reload(self) -> list[Planet]:
        records = self._store.read_all()
        self._records = records
        logger.debug("Reloaded %d planet(s)", len(records))
        with self._listeners_lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(list(records))
        return list(records)


# ── PlanetFormViewModel ────────────────────────────────────────────────────────

FIELD_NAME     = "name"
FIELD_DISTANCE = "distance_from_sun"
FIELD_SIZE     = "size"


def parse_positive_float(text: str) -> Optional[float]:
    """
    Parse *text* as a number greater than zero.

    A comma is accepted as decimal separator.  Returns None when the text is
    not a finite number or is <= 0.
    """
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


class PlanetFormViewModel:
    """
    Raw text of the add/edit form plus the rules it must satisfy.

    Attributes
    ──────────
    name, distance_text, size_text, nickname — current input text
    planet_id — id of the planet being edited, None when adding
    """

    def __init__(self) -> None:
        self.name:          str           = ""
        self.distance_text: str           = ""
        self.size_text:     str           = ""
        self.nickname:      str           = ""
        self.planet_id:     Optional[int] = None

    @property
    def is_editing(self) -> bool:
        return self.planet_id is not None

    def clear(self) -> None:
        """Reset to an empty "add" form."""
        self.name = self.distance_text = self.size_text = self.nickname = ""
        self.planet_id = None

    def from_planet(self, planet: Planet) -> None:
        """Pre-fill the form with *planet* for editing."""
        self.name = planet.name
        self.distance_text = format_number(planet.distance_from_sun)
        self.size_text = format_number(planet.size)
        self.nickname = planet.nickname or ""
        self.planet_id = planet.id

    def validate(self) -> dict[str, str]:
        """Return field → message for every invalid input (empty when valid)."""
        errors: dict[str, str] = {}
        if not self.name.strip():
            errors[FIELD_NAME] = "Informe o nome"
        if parse_positive_float(self.distance_text) is None:
            errors[FIELD_DISTANCE] = "Informe uma distância válida (maior que zero)"
        if parse_positive_float(self.size_text) is None:
            errors[FIELD_SIZE] = "Informe um tamanho válido (maior que zero)"
        return errors

    def to_planet(self) -> Planet:
        """
        Build the Planet described by the form.

        Raises:
            ValidationError: one or more fields are invalid.
        """
        errors = self.validate()
        if errors:
            raise ValidationError(errors)
        nickname = self.nickname.strip()
        return Planet(
            id=self.planet_id,
            name=self.name.strip(),
            distance_from_sun=parse_positive_float(self.distance_text),  # type: ignore[arg-type]
            size=parse_positive_float(self.size_text),  # type: ignore[arg-type]
            nickname=nickname or None,
        )


def format_number(value: float) -> str:
    """Shortest text that parses back to exactly *value*."""
    short = f"{value:g}"
    return short if float(short) == value else repr(value)
