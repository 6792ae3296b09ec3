"""Booking endpoints."""

from fastapi import APIRouter, Depends

from staybook.api.dependencies import get_container, require_identity
from staybook.api.schemas import (
    BookingRequest,
    BookingResponse,
    BookingWithPlaceResponse,
)
from staybook.containers import AppContainer
from staybook.domain.models import Identity

router = APIRouter(tags=["bookings"])


@router.get("/bookings")
def list_bookings(
    identity: Identity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> list[BookingWithPlaceResponse]:
    """Return the caller's bookings with places expanded."""
    return [
        BookingWithPlaceResponse.from_record(booking)
        for booking in container.booking_service.list_user_bookings(identity)
    ]


@router.post("/bookings")
def create_booking(
    payload: BookingRequest,
    identity: Identity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> BookingResponse:
    """Book a place for the caller."""
    booking = container.booking_service.create_booking(identity, payload.to_draft())
    return BookingResponse.from_record(booking)
