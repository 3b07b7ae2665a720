from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from tablebook.core.entities.table import Table
from tablebook.core.repositories.table_repository import TableRepository
from tablebook.infrastructure.models.models import ReservationModel, TableModel


class TableRepositoryImpl(TableRepository):
    """
    SQLAlchemy implementation for the table set.

    Availability is read from the reservations table on every load, never stored.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def list(self) -> list[Table]:
        q = (
            select(TableModel, ReservationModel.reservation_id)
            .outerjoin(ReservationModel, ReservationModel.table_id == TableModel.table_id)
            .order_by(TableModel.table_id)
        )
        return [self._to_entity(row, reservation_id) for row, reservation_id in self._db.execute(q)]

    def get(self, table_id: int) -> Table | None:
        row = self._db.get(TableModel, table_id)
        if row is None:
            return None

        reservation_id = self._db.scalar(
            select(ReservationModel.reservation_id).where(ReservationModel.table_id == table_id)
        )
        return self._to_entity(row, reservation_id)

    def replace_all(self, tables: Sequence[Table]) -> None:
        self._db.execute(delete(ReservationModel))
        self._db.execute(delete(TableModel))
        self._db.add_all(
            TableModel(table_id=t.table_id, number=t.number, capacity=t.capacity) for t in tables
        )
        self._db.flush()

    @staticmethod
    def _to_entity(row: TableModel, reservation_id: str | None) -> Table:
        return Table(
            table_id=row.table_id,
            number=row.number,
            capacity=row.capacity,
            active_reservation_id=reservation_id,
        )
