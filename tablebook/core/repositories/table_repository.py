from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tablebook.core.entities.table import Table


class TableRepository(ABC):
    """
    Repository interface for the fixed table set.
    """

    @abstractmethod
    def list(self) -> list[Table]:
        """Return every table ordered by id, with its active reservation id (if any)."""
        raise NotImplementedError

    @abstractmethod
    def get(self, table_id: int) -> Table | None:
        """Return a single table, or None if missing."""
        raise NotImplementedError

    @abstractmethod
    def replace_all(self, tables: Sequence[Table]) -> None:
        """Drop all tables (and the reservations pointing at them) and insert `tables`."""
        raise NotImplementedError
