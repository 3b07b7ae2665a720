from __future__ import annotations

from fastapi import APIRouter, Depends

from tablebook.schemas.models import (
    Reservation,
    ReservationCreate,
    ReservationResponse,
    ReservationUpdate,
    Table,
)
from tablebook.services.reservation_service import ReservationStore, store

router = APIRouter(prefix="/api")


def get_store() -> ReservationStore:
    return store


@router.get("/tables", response_model=list[Table])
def get_tables(reservations: ReservationStore = Depends(get_store)) -> list[Table]:
    """
    List every table with its current availability
    """
    return reservations.list_tables()


@router.get("/reservations", response_model=list[Reservation])
def get_reservations(reservations: ReservationStore = Depends(get_store)) -> list[Reservation]:
    """
    List every reservation
    """
    return reservations.list_reservations()


@router.post("/reservations", response_model=ReservationResponse, status_code=201)
def post_reservations(
    body: ReservationCreate,
    reservations: ReservationStore = Depends(get_store),
) -> ReservationResponse:
    """
    Reserve a table

    Returns:
      - 201 with the new reservation
      - 400 on missing/invalid fields, a reserved table or a party larger than the table
      - 404 if the table does not exist
    """
    return reservations.reserve(body)


@router.get("/reservations/{reservation_id}", response_model=Reservation)
def get_reservations_reservation_id(
    reservation_id: str,
    reservations: ReservationStore = Depends(get_store),
) -> Reservation:
    """
    Get a single reservation
    """
    return reservations.get_reservation(reservation_id)


@router.put("/update/{reservation_id}", response_model=ReservationResponse)
def put_update_reservation_id(
    reservation_id: str,
    body: ReservationUpdate,
    reservations: ReservationStore = Depends(get_store),
) -> ReservationResponse:
    """
    Modify a reservation; omitted fields keep their value

    Returns:
      - 200 with the merged reservation
      - 400 on invalid fields, a reserved target table or a party larger than the table
      - 404 if the reservation or the new table does not exist
    """
    return reservations.update(reservation_id, body)


@router.delete("/cancel/{reservation_id}", response_model=ReservationResponse)
def delete_cancel_reservation_id(
    reservation_id: str,
    reservations: ReservationStore = Depends(get_store),
) -> ReservationResponse:
    """
    Cancel a reservation and free its table
    """
    return reservations.cancel(reservation_id)
