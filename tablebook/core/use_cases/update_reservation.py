from __future__ import annotations

from dataclasses import dataclass

from tablebook.core.entities.reservation import Reservation
from tablebook.core.entities.table import Table
from tablebook.core.exceptions import ConflictError, NotFoundError, ValidationError
from tablebook.core.repositories.reservation_repository import ReservationRepository
from tablebook.core.repositories.table_repository import TableRepository
from tablebook.core.use_cases.common import Clock, is_blank, parse_int, parse_positive_int, utc_now
from tablebook.core.use_cases.reserve_table import GUESTS_MESSAGE, TABLE_ID_MESSAGE, capacity_message


@dataclass(frozen=True, slots=True)
class UpdateReservationCommand:
    """
    Partial update: a field left as None (or blank) keeps its current value.
    """
    reservation_id: str
    name: str | None = None
    guests: int | str | None = None
    table_id: int | str | None = None
    date: str | None = None
    time: str | None = None
    phone: str | None = None


class UpdateReservationUseCase:
    def __init__(
            self,
            *,
            table_repo: TableRepository,
            reservation_repo: ReservationRepository,
            clock: Clock = utc_now,
    ) -> None:
        self._table_repo = table_repo
        self._reservation_repo = reservation_repo
        self._clock = clock

    def execute(self, command: UpdateReservationCommand) -> Reservation:
        reservation = self._reservation_repo.get(command.reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found")

        guests = reservation.guests
        if not is_blank(command.guests):
            guests = parse_positive_int(command.guests)
            if guests is None:
                raise ValidationError(GUESTS_MESSAGE)

        target = self._target_table(reservation, command.table_id)

        # The final (table, guests) pair is checked even when only guests changed.
        if not target.fits(guests):
            raise ConflictError(capacity_message(guests))

        if not is_blank(command.name):
            reservation.name = command.name
        if not is_blank(command.date):
            reservation.date = command.date
        if not is_blank(command.time):
            reservation.time = command.time
        if not is_blank(command.phone):
            reservation.phone = command.phone
        reservation.guests = guests
        if target.table_id != reservation.table_id:
            reservation.move_to(target)
        reservation.touch(self._clock())

        self._reservation_repo.update(reservation)
        return reservation

    def _target_table(self, reservation: Reservation, raw_table_id: int | str | None) -> Table:
        if is_blank(raw_table_id):
            return self._current_table(reservation)

        table_id = parse_int(raw_table_id)
        if table_id is None:
            raise ValidationError(TABLE_ID_MESSAGE)
        if table_id == reservation.table_id:
            return self._current_table(reservation)

        table = self._table_repo.get(table_id)
        if table is None:
            raise NotFoundError("New table not found")
        if not table.is_available:
            raise ConflictError("New table is already reserved")
        return table

    def _current_table(self, reservation: Reservation) -> Table:
        table = self._table_repo.get(reservation.table_id)
        if table is None:
            raise NotFoundError("Table not found")
        return table
