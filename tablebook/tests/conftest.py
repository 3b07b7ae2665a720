from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker
from starlette.testclient import TestClient

import tablebook.infrastructure.models.models  # noqa: F401  (registers the ORM tables)
from tablebook.infrastructure.config import DEFAULT_TABLES
from tablebook.infrastructure.database import Base, build_engine
from tablebook.main import app
from tablebook.presentation.routers import get_store
from tablebook.services.reservation_service import ReservationStore


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """A private in-memory database per test, so state never leaks between tests."""
    engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine)


@pytest.fixture()
def store(session_factory: sessionmaker) -> ReservationStore:
    store = ReservationStore(session_factory)
    store.seed(DEFAULT_TABLES)
    return store


@pytest.fixture()
def client(store: ReservationStore) -> Iterator[TestClient]:
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def assert_in_sync(store: ReservationStore) -> Callable[..., None]:
    """
    Check that a table is unavailable exactly when one reservation points at it.
    """

    def _check(target: ReservationStore = store) -> None:
        reservations = target.list_reservations()
        holders: dict[int, list[str]] = {}
        for r in reservations:
            holders.setdefault(r.table_id, []).append(r.id)

        for table in target.list_tables():
            held_by = holders.get(table.id, [])
            assert len(held_by) <= 1, f"table {table.id} held by {held_by}"
            assert table.is_available == (not held_by), f"table {table.id} out of sync"

        assert len({r.id for r in reservations}) == len(reservations)

    return _check
