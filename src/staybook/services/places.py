"""Place listing management with owner-only mutation."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from staybook.domain.models import Identity
from staybook.domain.places import PlaceDraft, PlaceRecord
from staybook.errors import NotFoundError, OwnershipError

_logger = logging.getLogger(__name__)


class PlaceRepository(Protocol):
    """Persistence interface for places."""

    def create_place(self, owner_id: UUID, draft: PlaceDraft) -> PlaceRecord:
        """Create a place owned by ``owner_id`` and return it."""

    def get_place(self, place_id: UUID) -> PlaceRecord | None:
        """Return a place by id, if present."""

    def list_places(self) -> list[PlaceRecord]:
        """Return all places."""

    def list_places_by_owner(self, owner_id: UUID) -> list[PlaceRecord]:
        """Return places owned by a user."""

    def update_place(self, place_id: UUID, draft: PlaceDraft) -> PlaceRecord:
        """Replace the editable fields of a place; owner is untouched."""


@dataclass
class PlaceService:
    """Application service for places."""

    repository: PlaceRepository

    def create_place(self, identity: Identity, draft: PlaceDraft) -> PlaceRecord:
        """Create a place owned by the caller."""
        place = self.repository.create_place(identity.user_id, draft)
        _logger.info(
            "Created place: place_id=%s owner_id=%s", place.id, identity.user_id
        )
        return place

    def get_place(self, place_id: UUID) -> PlaceRecord:
        """Return a place or raise ``NotFoundError``."""
        place = self.repository.get_place(place_id)
        if place is None:
            raise NotFoundError()
        return place

    def list_places(self) -> list[PlaceRecord]:
        """Return every listed place."""
        return self.repository.list_places()

    def list_user_places(self, identity: Identity) -> list[PlaceRecord]:
        """Return the places owned by the caller."""
        return self.repository.list_places_by_owner(identity.user_id)

    def update_place(
        self, identity: Identity, place_id: UUID, draft: PlaceDraft
    ) -> PlaceRecord:
        """Update a place the caller owns.

        The stored owner is read first; a mismatch raises ``OwnershipError``
        and nothing is written.
        """
        place = self.get_place(place_id)
        if place.owner_id != identity.user_id:
            _logger.warning(
                "Ownership denied: place_id=%s user_id=%s", place_id, identity.user_id
            )
            raise OwnershipError()
        return self.repository.update_place(place_id, draft)
