from __future__ import annotations

from dataclasses import dataclass

from tablebook.core.entities.reservation import Reservation
from tablebook.core.exceptions import ConflictError, NotFoundError, ValidationError
from tablebook.core.repositories.reservation_repository import ReservationRepository
from tablebook.core.repositories.table_repository import TableRepository
from tablebook.core.use_cases.common import (
    Clock,
    IdFactory,
    is_blank,
    new_reservation_id,
    parse_int,
    parse_positive_int,
    utc_now,
)

REQUIRED_FIELDS_MESSAGE = "Name, guest count, table ID, date, and time are required"
GUESTS_MESSAGE = "Guest count must be a positive number"
TABLE_ID_MESSAGE = "Table ID must be a whole number"


def capacity_message(guests: int) -> str:
    return f"No available tables for {guests} guests"


@dataclass(frozen=True, slots=True)
class ReserveTableCommand:
    """
    Raw request values. Numbers may still be strings; the use case parses them.
    """
    name: str | None
    guests: int | str | None
    table_id: int | str | None
    date: str | None
    time: str | None
    phone: str | None = None


class ReserveTableUseCase:
    """
    Books an available table for a party that fits it.

    Every check runs before the single insert, so a rejected request leaves
    tables and reservations exactly as they were.
    """

    def __init__(
            self,
            *,
            table_repo: TableRepository,
            reservation_repo: ReservationRepository,
            clock: Clock = utc_now,
            id_factory: IdFactory = new_reservation_id,
    ) -> None:
        self._table_repo = table_repo
        self._reservation_repo = reservation_repo
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, command: ReserveTableCommand) -> Reservation:
        required = (command.name, command.guests, command.table_id, command.date, command.time)
        if any(is_blank(value) for value in required):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        guests = parse_positive_int(command.guests)
        if guests is None:
            raise ValidationError(GUESTS_MESSAGE)

        table_id = parse_int(command.table_id)
        if table_id is None:
            raise ValidationError(TABLE_ID_MESSAGE)

        table = self._table_repo.get(table_id)
        if table is None:
            raise NotFoundError("Table not found")
        if not table.is_available:
            raise ConflictError("Table is already reserved")
        if not table.fits(guests):
            raise ConflictError(capacity_message(guests))

        reservation = Reservation(
            reservation_id=self._next_id(),
            name=command.name,
            guests=guests,
            table_id=table.table_id,
            table_number=table.number,
            date=command.date,
            time=command.time,
            created_at=self._clock(),
            phone=None if is_blank(command.phone) else command.phone,
        )
        self._reservation_repo.add(reservation)
        return reservation

    def _next_id(self) -> str:
        reservation_id = self._id_factory()
        while self._reservation_repo.get(reservation_id) is not None:
            reservation_id = self._id_factory()
        return reservation_id
