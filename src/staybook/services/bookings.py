"""Booking creation and per-user listing."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from staybook.domain.bookings import BookingDraft, BookingRecord
from staybook.domain.models import Identity
from staybook.errors import NotFoundError
from staybook.services.places import PlaceRepository

_logger = logging.getLogger(__name__)


class BookingRepository(Protocol):
    """Persistence interface for bookings."""

    def create_booking(self, user_id: UUID, draft: BookingDraft) -> BookingRecord:
        """Create a booking for ``user_id`` and return it."""

    def list_bookings_by_user(self, user_id: UUID) -> list[BookingRecord]:
        """Return the user's bookings with their places expanded."""


@dataclass
class BookingService:
    """Application service for bookings."""

    repository: BookingRepository
    place_repository: PlaceRepository

    def create_booking(self, identity: Identity, draft: BookingDraft) -> BookingRecord:
        """Book a place for the caller."""
        if self.place_repository.get_place(draft.place_id) is None:
            raise NotFoundError("Place not found")
        booking = self.repository.create_booking(identity.user_id, draft)
        _logger.info(
            "Created booking: booking_id=%s place_id=%s user_id=%s",
            booking.id,
            draft.place_id,
            identity.user_id,
        )
        return booking

    def list_user_bookings(self, identity: Identity) -> list[BookingRecord]:
        """Return only the bookings made by the caller."""
        return [
            booking
            for booking in self.repository.list_bookings_by_user(identity.user_id)
            if booking.user_id == identity.user_id
        ]
