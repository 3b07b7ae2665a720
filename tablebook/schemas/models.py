from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Wire names are camelCase (tableId, isAvailable, createdAt)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Table(_CamelModel):
    id: int
    number: int
    capacity: int
    is_available: bool


class Reservation(_CamelModel):
    id: str
    name: str
    phone: str | None = None
    guests: int
    table_id: int
    table_number: int
    date: str
    time: str
    created_at: datetime
    updated_at: datetime | None = None


class ReservationCreate(_CamelModel):
    # Numbers may arrive as strings; presence and ranges are checked by the use cases.
    name: str | None = None
    phone: str | None = None
    guests: StrictInt | str | None = None
    table_id: StrictInt | str | None = None
    date: str | None = None
    time: str | None = None


class ReservationUpdate(_CamelModel):
    name: str | None = None
    phone: str | None = None
    guests: StrictInt | str | None = None
    table_id: StrictInt | str | None = None
    date: str | None = None
    time: str | None = None


class ReservationResponse(BaseModel):
    success: str
    reservation: Reservation


class ErrorResponse(BaseModel):
    error: str
