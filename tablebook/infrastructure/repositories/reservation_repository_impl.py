from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from tablebook.core.entities.reservation import Reservation
from tablebook.core.repositories.reservation_repository import ReservationRepository
from tablebook.infrastructure.models.models import ReservationModel


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands datetimes back without tzinfo.
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class ReservationRepositoryImpl(ReservationRepository):
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[Reservation]:
        rows = self.db.scalars(select(ReservationModel).order_by(ReservationModel.seq))
        return [self._to_entity(row) for row in rows]

    def get(self, reservation_id: str) -> Reservation | None:
        row = self._row(reservation_id)
        if row is None:
            return None
        return self._to_entity(row)

    def add(self, reservation: Reservation) -> None:
        row = ReservationModel(reservation_id=reservation.reservation_id)
        self._copy(reservation, row)
        self.db.add(row)
        self.db.flush()

    def update(self, reservation: Reservation) -> None:
        row = self._row(reservation.reservation_id)
        if row is None:
            raise LookupError(f"Reservation {reservation.reservation_id!r} is not stored")
        self._copy(reservation, row)
        self.db.flush()

    def delete(self, reservation_id: str) -> None:
        row = self._row(reservation_id)
        if row is not None:
            self.db.delete(row)
            self.db.flush()

    def _row(self, reservation_id: str) -> ReservationModel | None:
        return self.db.scalar(
            select(ReservationModel).where(ReservationModel.reservation_id == reservation_id)
        )

    @staticmethod
    def _copy(reservation: Reservation, row: ReservationModel) -> None:
        row.name = reservation.name
        row.phone = reservation.phone
        row.guests = reservation.guests
        row.table_id = reservation.table_id
        row.table_number = reservation.table_number
        row.date = reservation.date
        row.time = reservation.time
        row.created_at = reservation.created_at
        row.updated_at = reservation.updated_at

    @staticmethod
    def _to_entity(row: ReservationModel) -> Reservation:
        return Reservation(
            reservation_id=row.reservation_id,
            name=row.name,
            guests=row.guests,
            table_id=row.table_id,
            table_number=row.table_number,
            date=row.date,
            time=row.time,
            created_at=_as_utc(row.created_at),
            phone=row.phone,
            updated_at=_as_utc(row.updated_at),
        )
