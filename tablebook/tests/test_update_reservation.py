from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy.orm import sessionmaker

from tablebook.core.exceptions import ConflictError, NotFoundError, ValidationError
from tablebook.infrastructure.config import TableSeed
from tablebook.schemas.models import Reservation, ReservationCreate, ReservationUpdate
from tablebook.services.reservation_service import ReservationStore


def _reserve(store: ReservationStore, *, table_id: int, guests: int = 2, name: str = "Ann") -> Reservation:
    body = ReservationCreate(name=name, guests=guests, table_id=table_id, date="2024-01-01", time="18:00")
    return store.reserve(body).reservation


def _availability(store: ReservationStore) -> dict[int, bool]:
    return {t.id: t.is_available for t in store.list_tables()}


def test_omitted_fields_keep_their_values(store: ReservationStore) -> None:
    original = _reserve(store, table_id=3, guests=3)

    result = store.update(original.id, ReservationUpdate(time="20:30"))

    assert result.success == "Reservation updated for Ann"
    updated = result.reservation
    assert updated.time == "20:30"
    assert updated.name == original.name
    assert updated.guests == original.guests
    assert updated.table_id == original.table_id
    assert updated.date == original.date
    assert updated.created_at == original.created_at
    assert updated.updated_at is not None
    assert store.get_reservation(original.id) == updated


def test_blank_fields_count_as_omitted(store: ReservationStore) -> None:
    original = _reserve(store, table_id=3)

    updated = store.update(original.id, ReservationUpdate(name="", phone=" ", guests="", table_id="")).reservation

    assert updated.name == "Ann"
    assert updated.phone is None
    assert updated.guests == 2
    assert updated.table_id == 3


def test_updated_at_comes_from_the_clock(session_factory: sessionmaker) -> None:
    fixed = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    store = ReservationStore(session_factory, clock=lambda: fixed)

    store.seed([TableSeed(id=1, number=1, capacity=2)])
    original = _reserve(store, table_id=1)

    updated = store.update(original.id, ReservationUpdate(name="Ann B.")).reservation

    assert updated.created_at == fixed
    assert updated.updated_at == fixed


def test_moving_to_a_free_table_swaps_availability(store: ReservationStore, assert_in_sync) -> None:
    original = _reserve(store, table_id=1)

    updated = store.update(original.id, ReservationUpdate(table_id=4)).reservation

    assert updated.table_id == 4
    assert updated.table_number == 4
    availability = _availability(store)
    assert availability[1] is True
    assert availability[4] is False
    assert_in_sync()


def test_moving_to_a_reserved_table_is_a_conflict_and_nothing_moves(
        store: ReservationStore, assert_in_sync
) -> None:
    mine = _reserve(store, table_id=1)
    theirs = _reserve(store, table_id=2, name="Bob")

    with pytest.raises(ConflictError, match="New table is already reserved"):
        store.update(mine.id, ReservationUpdate(table_id=2, name="Changed"))

    assert store.get_reservation(mine.id) == mine
    assert store.get_reservation(theirs.id) == theirs
    availability = _availability(store)
    assert availability[1] is False
    assert availability[2] is False
    assert_in_sync()


def test_moving_to_an_unknown_table_is_not_found(store: ReservationStore, assert_in_sync) -> None:
    mine = _reserve(store, table_id=1)

    with pytest.raises(NotFoundError, match="New table not found"):
        store.update(mine.id, ReservationUpdate(table_id=42))

    assert store.get_reservation(mine.id) == mine
    assert_in_sync()


def test_same_table_id_flips_nothing(store: ReservationStore, assert_in_sync) -> None:
    mine = _reserve(store, table_id=5, guests=4)
    before = _availability(store)

    updated = store.update(mine.id, ReservationUpdate(table_id="5", guests=6)).reservation

    assert updated.table_id == 5
    assert updated.guests == 6
    assert _availability(store) == before
    assert_in_sync()


def test_guests_only_change_is_checked_against_capacity(store: ReservationStore) -> None:
    mine = _reserve(store, table_id=1, guests=2)

    with pytest.raises(ConflictError, match="No available tables for 3 guests"):
        store.update(mine.id, ReservationUpdate(guests=3))

    assert store.get_reservation(mine.id).guests == 2


def test_new_table_is_checked_with_the_current_guest_count(store: ReservationStore, assert_in_sync) -> None:
    mine = _reserve(store, table_id=5, guests=5)

    with pytest.raises(ConflictError, match="No available tables for 5 guests"):
        store.update(mine.id, ReservationUpdate(table_id=1))

    assert _availability(store)[5] is False
    assert _availability(store)[1] is True
    assert_in_sync()


def test_bigger_party_can_move_to_a_bigger_table(store: ReservationStore, assert_in_sync) -> None:
    mine = _reserve(store, table_id=1, guests=2)

    updated = store.update(mine.id, ReservationUpdate(table_id=6, guests=7)).reservation

    assert (updated.table_id, updated.guests) == (6, 7)
    assert _availability(store)[1] is True
    assert_in_sync()


@pytest.mark.parametrize("guests", [0, -1, "many"])
def test_invalid_guest_count_is_a_validation_error(store: ReservationStore, guests) -> None:
    mine = _reserve(store, table_id=3)

    with pytest.raises(ValidationError, match="Guest count must be a positive number"):
        store.update(mine.id, ReservationUpdate(guests=guests))

    assert store.get_reservation(mine.id) == mine


def test_unknown_reservation_is_not_found(store: ReservationStore) -> None:
    with pytest.raises(NotFoundError, match="Reservation not found"):
        store.update("missing", ReservationUpdate(name="Nobody"))
