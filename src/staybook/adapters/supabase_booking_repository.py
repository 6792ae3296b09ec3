"""Supabase-backed booking repository."""

from dataclasses import dataclass
from datetime import date
from typing import Any
from uuid import UUID

from supabase import Client

from staybook.adapters.supabase_place_repository import PLACE_COLUMNS, row_to_place
from staybook.adapters.supabase_support import execute, first_row
from staybook.domain.bookings import BookingDraft, BookingRecord
from staybook.services.bookings import BookingRepository

_BOOKING_COLUMNS = (
    "id, place_id, user_id, check_in, check_out, number_of_guests, name, phone, price"
)


@dataclass
class SupabaseBookingRepository(BookingRepository):
    """Supabase implementation for bookings."""

    client: Client

    def create_booking(self, user_id: UUID, draft: BookingDraft) -> BookingRecord:
        """Insert a booking row for ``user_id``."""
        response = execute(
            self.client.table("bookings").insert(
                {
                    "place_id": str(draft.place_id),
                    "user_id": str(user_id),
                    "check_in": _iso(draft.check_in),
                    "check_out": _iso(draft.check_out),
                    "number_of_guests": draft.number_of_guests,
                    "name": draft.name,
                    "phone": draft.phone,
                    "price": draft.price,
                }
            ),
            "create booking",
        )
        return _row_to_booking(first_row(response, "create booking"))

    def list_bookings_by_user(self, user_id: UUID) -> list[BookingRecord]:
        """Return a user's bookings with the booked place embedded."""
        response = execute(
            self.client.table("bookings")
            .select(f"{_BOOKING_COLUMNS}, place:places({PLACE_COLUMNS})")
            .eq("user_id", str(user_id))
            .order("check_in"),
            "list bookings",
        )
        return [_row_to_booking(row) for row in response.data or []]


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value[:10]) if value else None


def _row_to_booking(row: dict[str, Any]) -> BookingRecord:
    place = row.get("place")
    price = row.get("price")
    return BookingRecord(
        id=UUID(row["id"]),
        place_id=UUID(row["place_id"]),
        user_id=UUID(row["user_id"]),
        check_in=_parse_date(row.get("check_in")),
        check_out=_parse_date(row.get("check_out")),
        number_of_guests=row.get("number_of_guests"),
        name=row.get("name"),
        phone=row.get("phone"),
        price=float(price) if price is not None else None,
        place=row_to_place(place) if place else None,
    )
