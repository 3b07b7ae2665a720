from __future__ import annotations


class ReservationError(Exception):
    """Base for request-level failures; `message` is shown to the caller verbatim."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ReservationError):
    """Raise to map to HTTP 400 (missing or malformed input)."""


class NotFoundError(ReservationError):
    """Raise to map to HTTP 404 (unknown table or reservation id)."""


class ConflictError(ReservationError):
    """Raise to map to HTTP 400 (table already reserved, or party too large)."""
