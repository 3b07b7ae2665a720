from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tablebook.infrastructure.database import Base


class TableModel(Base):
    __tablename__ = "tables"

    table_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)


class ReservationModel(Base):
    __tablename__ = "reservations"

    # Insertion order, so listings come back in creation order.
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    reservation_id: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    phone: Mapped[str | None] = mapped_column(String, nullable=True)
    guests: Mapped[int] = mapped_column(Integer, nullable=False)
    # UNIQUE: a table holds at most one reservation, which is what "unavailable" means.
    table_id: Mapped[int] = mapped_column(ForeignKey("tables.table_id"), nullable=False, unique=True)
    table_number: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[str] = mapped_column(String, nullable=False)
    time: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
