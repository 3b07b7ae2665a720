from __future__ import annotations

from collections.abc import Sequence

from tablebook.core.entities.table import Table
from tablebook.core.exceptions import ValidationError
from tablebook.core.repositories.table_repository import TableRepository


class ListTablesUseCase:
    def __init__(self, *, table_repo: TableRepository) -> None:
        self._table_repo = table_repo

    def execute(self) -> list[Table]:
        return self._table_repo.list()


class SeedTablesUseCase:
    """
    Installs the fixed table set at startup. Any existing reservations are dropped
    with the tables they point at.
    """

    def __init__(self, *, table_repo: TableRepository) -> None:
        self._table_repo = table_repo

    def execute(self, tables: Sequence[Table]) -> int:
        seen: set[int] = set()
        for table in tables:
            if table.table_id in seen:
                raise ValidationError(f"Duplicate table id: {table.table_id}")
            if table.capacity <= 0:
                raise ValidationError(f"Table {table.table_id} must have a positive capacity")
            seen.add(table.table_id)

        self._table_repo.replace_all(
            [Table(table_id=t.table_id, number=t.number, capacity=t.capacity) for t in tables]
        )
        return len(seen)
