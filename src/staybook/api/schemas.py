"""Request and response bodies for the HTTP API."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from staybook.domain.bookings import BookingDraft, BookingRecord
from staybook.domain.models import UserRecord
from staybook.domain.places import PlaceDraft, PlaceRecord


class CamelModel(BaseModel):
    """Base model using camelCase names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class LoginRequest(CamelModel):
    email: str
    password: str


class UserResponse(CamelModel):
    id: UUID
    name: str
    email: str

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)


class PlaceRequest(CamelModel):
    """Editable place fields. Unknown keys such as ``owner`` are dropped."""

    title: str | None = None
    address: str | None = None
    added_photos: list[str] = Field(default_factory=list)
    description: str | None = None
    perks: list[str] = Field(default_factory=list)
    extra_info: str | None = None
    check_in: int | None = None
    check_out: int | None = None
    max_guests: int | None = None
    price: float | None = None

    def to_draft(self) -> PlaceDraft:
        return PlaceDraft(
            title=self.title,
            address=self.address,
            photos=tuple(self.added_photos),
            description=self.description,
            perks=tuple(self.perks),
            extra_info=self.extra_info,
            check_in=self.check_in,
            check_out=self.check_out,
            max_guests=self.max_guests,
            price=self.price,
        )


class PlaceUpdateRequest(PlaceRequest):
    id: UUID


class PlaceResponse(CamelModel):
    id: UUID
    owner: UUID
    title: str | None
    address: str | None
    photos: list[str]
    description: str | None
    perks: list[str]
    extra_info: str | None
    check_in: int | None
    check_out: int | None
    max_guests: int | None
    price: float | None

    @classmethod
    def from_record(cls, place: PlaceRecord) -> "PlaceResponse":
        return cls(
            id=place.id,
            owner=place.owner_id,
            title=place.title,
            address=place.address,
            photos=list(place.photos),
            description=place.description,
            perks=list(place.perks),
            extra_info=place.extra_info,
            check_in=place.check_in,
            check_out=place.check_out,
            max_guests=place.max_guests,
            price=place.price,
        )


class BookingRequest(CamelModel):
    """Booking fields. A client-supplied ``user`` is dropped."""

    place: UUID
    check_in: date | None = None
    check_out: date | None = None
    number_of_guests: int | None = None
    name: str | None = None
    phone: str | None = None
    price: float | None = None

    def to_draft(self) -> BookingDraft:
        return BookingDraft(
            place_id=self.place,
            check_in=self.check_in,
            check_out=self.check_out,
            number_of_guests=self.number_of_guests,
            name=self.name,
            phone=self.phone,
            price=self.price,
        )


class _BookingFields(CamelModel):
    id: UUID
    user: UUID
    check_in: date | None
    check_out: date | None
    number_of_guests: int | None
    name: str | None
    phone: str | None
    price: float | None


class BookingResponse(_BookingFields):
    place: UUID

    @classmethod
    def from_record(cls, booking: BookingRecord) -> "BookingResponse":
        return cls(place=booking.place_id, **_booking_fields(booking))


class BookingWithPlaceResponse(_BookingFields):
    """Booking with its place expanded; ``place`` is null if it was removed."""

    place: PlaceResponse | None

    @classmethod
    def from_record(cls, booking: BookingRecord) -> "BookingWithPlaceResponse":
        place = PlaceResponse.from_record(booking.place) if booking.place else None
        return cls(place=place, **_booking_fields(booking))


class UploadByLinkRequest(CamelModel):
    link: str = Field(min_length=1)


def _booking_fields(booking: BookingRecord) -> dict[str, object]:
    return {
        "id": booking.id,
        "user": booking.user_id,
        "check_in": booking.check_in,
        "check_out": booking.check_out,
        "number_of_guests": booking.number_of_guests,
        "name": booking.name,
        "phone": booking.phone,
        "price": booking.price,
    }
