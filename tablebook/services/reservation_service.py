from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from tablebook.core.entities.reservation import Reservation as CoreReservation
from tablebook.core.entities.table import Table as CoreTable
from tablebook.core.use_cases.cancel_reservation import CancelReservationUseCase
from tablebook.core.use_cases.common import Clock, IdFactory, new_reservation_id, utc_now
from tablebook.core.use_cases.manage_tables import ListTablesUseCase, SeedTablesUseCase
from tablebook.core.use_cases.reserve_table import ReserveTableCommand, ReserveTableUseCase
from tablebook.core.use_cases.update_reservation import UpdateReservationCommand, UpdateReservationUseCase
from tablebook.core.use_cases.view_reservations import GetReservationUseCase, ListReservationsUseCase
from tablebook.infrastructure.config import TableSeed
from tablebook.infrastructure.database import SessionLocal
from tablebook.infrastructure.logger_config import logger
from tablebook.infrastructure.repositories.reservation_repository_impl import ReservationRepositoryImpl
from tablebook.infrastructure.repositories.table_repository_impl import TableRepositoryImpl
from tablebook.schemas.models import (
    Reservation,
    ReservationCreate,
    ReservationResponse,
    ReservationUpdate,
    Table,
)


def _to_table_schema(table: CoreTable) -> Table:
    return Table(
        id=table.table_id,
        number=table.number,
        capacity=table.capacity,
        is_available=table.is_available,
    )


def _to_reservation_schema(reservation: CoreReservation) -> Reservation:
    return Reservation(
        id=reservation.reservation_id,
        name=reservation.name,
        phone=reservation.phone,
        guests=reservation.guests,
        table_id=reservation.table_id,
        table_number=reservation.table_number,
        date=reservation.date,
        time=reservation.time,
        created_at=reservation.created_at,
        updated_at=reservation.updated_at,
    )


class ReservationStore:
    """
    Sole owner of the tables and reservations.

    Every operation holds one lock for its whole check-then-act sequence and runs
    in its own session: committed when the use case returns, rolled back when it
    raises, so a rejected request never leaves a partial change behind.
    """

    def __init__(
            self,
            session_factory: Callable[[], Session],
            *,
            clock: Clock = utc_now,
            id_factory: IdFactory = new_reservation_id,
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.RLock()

    @contextmanager
    def _unit_of_work(self) -> Iterator[Session]:
        with self._lock:
            db = self._session_factory()
            try:
                yield db
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def seed(self, tables: Iterable[TableSeed]) -> int:
        entities = [CoreTable(table_id=t.id, number=t.number, capacity=t.capacity) for t in tables]
        with self._unit_of_work() as db:
            count = SeedTablesUseCase(table_repo=TableRepositoryImpl(db)).execute(entities)

        logger.info(f"Seeded {count} tables")
        return count

    def list_tables(self) -> list[Table]:
        with self._unit_of_work() as db:
            tables = ListTablesUseCase(table_repo=TableRepositoryImpl(db)).execute()
        return [_to_table_schema(t) for t in tables]

    def list_reservations(self) -> list[Reservation]:
        with self._unit_of_work() as db:
            reservations = ListReservationsUseCase(reservation_repo=ReservationRepositoryImpl(db)).execute()
        return [_to_reservation_schema(r) for r in reservations]

    def get_reservation(self, reservation_id: str) -> Reservation:
        with self._unit_of_work() as db:
            use_case = GetReservationUseCase(reservation_repo=ReservationRepositoryImpl(db))
            reservation = use_case.execute(reservation_id=reservation_id)
        return _to_reservation_schema(reservation)

    def reserve(self, body: ReservationCreate) -> ReservationResponse:
        command = ReserveTableCommand(
            name=body.name,
            guests=body.guests,
            table_id=body.table_id,
            date=body.date,
            time=body.time,
            phone=body.phone,
        )
        with self._unit_of_work() as db:
            use_case = ReserveTableUseCase(
                table_repo=TableRepositoryImpl(db),
                reservation_repo=ReservationRepositoryImpl(db),
                clock=self._clock,
                id_factory=self._id_factory,
            )
            reservation = use_case.execute(command)

        logger.info(f"Reservation {reservation.reservation_id} created on table {reservation.table_id}")
        return ReservationResponse(
            success=(
                f"Table {reservation.table_number} reserved for {reservation.name} "
                f"({reservation.guests} guests)"
            ),
            reservation=_to_reservation_schema(reservation),
        )

    def update(self, reservation_id: str, body: ReservationUpdate) -> ReservationResponse:
        command = UpdateReservationCommand(
            reservation_id=reservation_id,
            name=body.name,
            guests=body.guests,
            table_id=body.table_id,
            date=body.date,
            time=body.time,
            phone=body.phone,
        )
        with self._unit_of_work() as db:
            use_case = UpdateReservationUseCase(
                table_repo=TableRepositoryImpl(db),
                reservation_repo=ReservationRepositoryImpl(db),
                clock=self._clock,
            )
            reservation = use_case.execute(command)

        logger.info(f"Reservation {reservation.reservation_id} updated, now on table {reservation.table_id}")
        return ReservationResponse(
            success=f"Reservation updated for {reservation.name}",
            reservation=_to_reservation_schema(reservation),
        )

    def cancel(self, reservation_id: str) -> ReservationResponse:
        with self._unit_of_work() as db:
            use_case = CancelReservationUseCase(reservation_repo=ReservationRepositoryImpl(db))
            reservation = use_case.execute(reservation_id=reservation_id)

        logger.info(f"Reservation {reservation.reservation_id} canceled, table {reservation.table_id} freed")
        return ReservationResponse(
            success=f"Reservation canceled for {reservation.name}",
            reservation=_to_reservation_schema(reservation),
        )


store = ReservationStore(SessionLocal)
