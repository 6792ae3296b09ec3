"""Booking domain models."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from staybook.domain.places import PlaceRecord


@dataclass(frozen=True)
class BookingDraft:
    """Client-supplied booking fields; never carries the booking user."""

    place_id: UUID
    check_in: date | None = None
    check_out: date | None = None
    number_of_guests: int | None = None
    name: str | None = None
    phone: str | None = None
    price: float | None = None


@dataclass(frozen=True)
class BookingRecord:
    """Represents a persisted booking, optionally with its place expanded."""

    id: UUID
    place_id: UUID
    user_id: UUID
    check_in: date | None = None
    check_out: date | None = None
    number_of_guests: int | None = None
    name: str | None = None
    phone: str | None = None
    price: float | None = None
    place: PlaceRecord | None = None
