"""Place domain models."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class PlaceDraft:
    """Client-editable place fields; never carries id or owner."""

    title: str | None = None
    address: str | None = None
    photos: tuple[str, ...] = ()
    description: str | None = None
    perks: tuple[str, ...] = ()
    extra_info: str | None = None
    check_in: int | None = None
    check_out: int | None = None
    max_guests: int | None = None
    price: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "photos", tuple(self.photos))
        object.__setattr__(self, "perks", tuple(dict.fromkeys(self.perks)))


@dataclass(frozen=True)
class PlaceRecord:
    """Represents a persisted place."""

    id: UUID
    owner_id: UUID
    title: str | None = None
    address: str | None = None
    photos: tuple[str, ...] = ()
    description: str | None = None
    perks: tuple[str, ...] = ()
    extra_info: str | None = None
    check_in: int | None = None
    check_out: int | None = None
    max_guests: int | None = None
    price: float | None = None
