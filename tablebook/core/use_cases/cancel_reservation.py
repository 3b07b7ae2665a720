from __future__ import annotations

from tablebook.core.entities.reservation import Reservation
from tablebook.core.exceptions import NotFoundError
from tablebook.core.repositories.reservation_repository import ReservationRepository


class CancelReservationUseCase:
    """
    Removes a reservation. Its table becomes available again since nothing
    references it any more.
    """

    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self, *, reservation_id: str) -> Reservation:
        reservation = self._reservation_repo.get(reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found")

        self._reservation_repo.delete(reservation_id)
        return reservation
