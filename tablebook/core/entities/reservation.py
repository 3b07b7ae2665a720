from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tablebook.core.entities.table import Table


@dataclass(slots=True)
class Reservation:
    reservation_id: str
    name: str
    guests: int
    table_id: int
    table_number: int
    date: str
    time: str
    created_at: datetime
    phone: str | None = None
    updated_at: datetime | None = None

    def move_to(self, table: Table) -> None:
        self.table_id = table.table_id
        self.table_number = table.number

    def touch(self, now: datetime) -> None:
        self.updated_at = now
