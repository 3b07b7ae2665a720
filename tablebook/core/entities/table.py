from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Table:
    """
    A fixed seating unit. Availability is not stored: a table is available
    exactly when no reservation references it.
    """
    table_id: int
    number: int
    capacity: int
    active_reservation_id: str | None = None

    @property
    def is_available(self) -> bool:
        return self.active_reservation_id is None

    def fits(self, guests: int) -> bool:
        return guests <= self.capacity
