from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_reservation_id() -> str:
    return uuid4().hex


def is_blank(value: Any) -> bool:
    """None and whitespace-only strings count as "not supplied"."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_int(value: Any) -> int | None:
    """
    Accept ints and plain ASCII decimal strings (HTML forms post numbers as text).
    Returns None for anything else: bools, underscores, non-ASCII digits.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text.startswith("-") else text
        if digits.isascii() and digits.isdigit():
            return int(text)
    return None


def parse_positive_int(value: Any) -> int | None:
    number = parse_int(value)
    if number is None or number <= 0:
        return None
    return number
