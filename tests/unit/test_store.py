"""
Unit tests for src/store/

Coverage plan
─────────────
models.py   → 6 tests  (Planet defaults, to_row/from_row, sqlite3.Row)
db.py       → 22 tests (create, read_all, update, delete, missing ids,
                        schema creation + version, lazy single connection,
                        concurrent first use, close races,
                        unreadable file, constraint errors)
─────────────────────────────────────────────────────────────────
Total       = 28 tests
"""

import sqlite3
import threading

import pytest


def _planet(name="Terra", distance=1.0, size=12742.0, nickname=None, id=None):
    from src.store.models import Planet
    return Planet(
        id=id,
        name=name,
        distance_from_sun=distance,
        size=size,
        nickname=nickname,
    )


# ─────────────────────────────────────────────────────────────────────────────
# 1. Planet model
# ─────────────────────────────────────────────────────────────────────────────

class TestPlanet:
    """Planet dataclass — typed planet plus its flat row form."""

    def test_id_and_nickname_default_to_none(self):
        p = _planet()
        assert p.id is None
        assert p.nickname is None

    def test_to_row_omits_id_when_unsaved(self):
        row = _planet(nickname="Planeta Azul").to_row()
        assert row == {
            "nome": "Terra",
            "distancia_sol": 1.0,
            "tamanho": 12742.0,
            "apelido": "Planeta Azul",
        }

    def test_to_row_includes_id_when_saved(self):
        row = _planet(id=7).to_row()
        assert row["id"] == 7

    def test_from_row_round_trip_without_id(self):
        from src.store.models import Planet
        p = _planet(name="Marte", distance=1.52, size=6779.0, nickname="Vermelho")
        assert Planet.from_row(p.to_row()) == p

    def test_from_row_accepts_sqlite_row(self):
        from src.store.models import Planet
        conn = sqlite3.connect(":memory:")
        conn.row_factory = sqlite3.Row
        row = conn.execute(
            "SELECT 3 AS id, 'Vênus' AS nome, 0.72 AS distancia_sol, "
            "12104.0 AS tamanho, NULL AS apelido"
        ).fetchone()
        p = Planet.from_row(row)
        assert p.id == 3
        assert p.name == "Vênus"
        assert p.nickname is None

    def test_from_row_requires_name(self):
        from src.store.models import Planet
        with pytest.raises(KeyError):
            Planet.from_row({"distancia_sol": 1.0, "tamanho": 2.0})


# ─────────────────────────────────────────────────────────────────────────────
# 2. PlanetStore CRUD
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def store(tmp_path):
    """Return a fresh PlanetStore backed by a temporary SQLite file."""
    from src.store.db import PlanetStore
    s = PlanetStore(db_path=str(tmp_path / "test.db"))
    yield s
    s.close()


class TestPlanetStoreCreate:
    """create() — insert a planet and return its new id."""

    def test_create_returns_positive_integer_id(self, store):
        planet_id = store.create(_planet())
        assert isinstance(planet_id, int)
        assert planet_id >= 1

    def test_create_two_records_returns_distinct_ids(self, store):
        id1 = store.create(_planet(name="Terra"))
        id2 = store.create(_planet(name="Marte"))
        assert id1 != id2

    def test_create_ignores_caller_supplied_id(self, store):
        store.create(_planet(name="Terra"))
        new_id = store.create(_planet(name="Marte", id=1))
        assert new_id != 1
        assert len(store.read_all()) == 2

    def test_create_null_name_raises_store_error(self, store):
        from src.exceptions import StoreError
        with pytest.raises(StoreError):
            store.create(_planet(name=None))


class TestPlanetStoreReadAll:
    """read_all() — every stored planet, ids injected."""

    def test_read_all_on_empty_store_is_empty(self, store):
        assert store.read_all() == []

    def test_read_all_returns_inserted_values(self, store):
        inserted = [
            _planet(name="Mercúrio", distance=0.39, size=4879.0),
            _planet(name="Terra", distance=1.0, size=12742.0, nickname="Planeta Azul"),
            _planet(name="Júpiter", distance=5.2, size=139820.0),
        ]
        ids = [store.create(p) for p in inserted]
        stored = {p.id: p for p in store.read_all()}
        assert set(stored) == set(ids)
        for planet_id, original in zip(ids, inserted):
            original.id = planet_id
            assert stored[planet_id] == original

    def test_read_all_preserves_missing_nickname_as_none(self, store):
        store.create(_planet(nickname=None))
        assert store.read_all()[0].nickname is None


class TestPlanetStoreUpdate:
    """update() — replace all non-key columns of one row."""

    def test_update_replaces_fields_and_keeps_id(self, store):
        planet_id = store.create(_planet(name="Terra"))
        changed = _planet(id=planet_id, name="Terra II", distance=1.1,
                          size=13000.0, nickname="Nova")
        assert store.update(changed) == 1
        (stored,) = store.read_all()
        assert stored == changed

    def test_update_can_clear_nickname(self, store):
        planet_id = store.create(_planet(nickname="Azul"))
        store.update(_planet(id=planet_id, nickname=None))
        assert store.read_all()[0].nickname is None

    def test_update_missing_id_is_zero_row_noop(self, store):
        store.create(_planet())
        before = store.read_all()
        assert store.update(_planet(id=999, name="Fantasma")) == 0
        assert store.read_all() == before

    def test_update_without_id_raises_value_error(self, store):
        with pytest.raises(ValueError):
            store.update(_planet())


class TestPlanetStoreDelete:
    """delete() — remove exactly one row by id."""

    def test_delete_removes_exactly_one(self, store):
        ids = [store.create(_planet(name=n)) for n in ("A", "B", "C")]
        assert store.delete(ids[1]) == 1
        assert {p.id for p in store.read_all()} == {ids[0], ids[2]}

    def test_delete_missing_id_is_zero_row_noop(self, store):
        store.create(_planet())
        assert store.delete(12345) == 0
        assert len(store.read_all()) == 1


class TestPlanetStoreLifecycle:
    """initialize() / close() — lazy single connection and schema version."""

    def test_schema_auto_created_on_first_use(self, tmp_path):
        from src.store.db import PlanetStore, SCHEMA_VERSION
        db_path = tmp_path / "nested" / "fresh.db"
        s = PlanetStore(db_path=str(db_path))
        assert s.create(_planet()) >= 1
        s.close()
        conn = sqlite3.connect(str(db_path))
        assert conn.execute("PRAGMA user_version").fetchone()[0] == SCHEMA_VERSION
        conn.close()

    def test_initialize_is_idempotent(self, store):
        assert store.initialize() is store.initialize()

    def test_concurrent_first_use_opens_one_connection(self, store):
        conns = []
        barrier = threading.Barrier(8)

        def opener():
            barrier.wait()
            conns.append(store.initialize())

        threads = [threading.Thread(target=opener) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(c) for c in conns}) == 1

    def test_data_survives_reopen(self, tmp_path):
        from src.store.db import PlanetStore
        path = str(tmp_path / "persist.db")
        first = PlanetStore(path)
        first.create(_planet(name="Saturno"))
        first.close()
        second = PlanetStore(path)
        assert [p.name for p in second.read_all()] == ["Saturno"]
        second.close()

    def test_newer_schema_version_is_rejected(self, tmp_path):
        from src.exceptions import SchemaVersionError
        from src.store.db import PlanetStore
        path = tmp_path / "future.db"
        conn = sqlite3.connect(str(path))
        conn.execute("PRAGMA user_version = 2")
        conn.close()
        with pytest.raises(SchemaVersionError):
            PlanetStore(str(path)).initialize()

    def test_unreadable_file_raises_store_error(self, tmp_path):
        from src.exceptions import StoreError
        from src.store.db import PlanetStore
        path = tmp_path / "garbage.db"
        path.write_bytes(b"this is not an sqlite database" * 64)
        with pytest.raises(StoreError) as info:
            PlanetStore(str(path)).initialize()
        assert isinstance(info.value.__cause__, sqlite3.Error)

    def test_unreadable_file_fails_operations_too(self, tmp_path):
        from src.exceptions import StoreError
        from src.store.db import PlanetStore
        path = tmp_path / "garbage.db"
        path.write_bytes(b"\x00\x01not sqlite" * 100)
        with pytest.raises(StoreError):
            PlanetStore(str(path)).create(_planet())

    def test_close_racing_with_operations_never_fails(self, store):
        """close() from another thread only forces a reopen."""
        store.create(_planet())
        stop = threading.Event()
        errors = []

        def closer():
            while not stop.is_set():
                store.close()

        def reader():
            try:
                for _ in range(200):
                    store.read_all()
                    store.create(_planet(name="Plutão"))
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)
            finally:
                stop.set()

        threads = [threading.Thread(target=closer), threading.Thread(target=reader)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert errors == []

    def test_memory_database_is_supported(self):
        from src.store.db import PlanetStore
        s = PlanetStore(":memory:")
        s.create(_planet())
        assert len(s.read_all()) == 1
        s.close()
