from __future__ import annotations

from abc import ABC, abstractmethod

from tablebook.core.entities.reservation import Reservation


class ReservationRepository(ABC):
    @abstractmethod
    def list(self) -> list[Reservation]:
        """Return every reservation in creation order."""
        raise NotImplementedError

    @abstractmethod
    def get(self, reservation_id: str) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
    def add(self, reservation: Reservation) -> None:
        raise NotImplementedError

    @abstractmethod
    def update(self, reservation: Reservation) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, reservation_id: str) -> None:
        raise NotImplementedError
