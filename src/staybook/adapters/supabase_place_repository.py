"""Supabase-backed place repository."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from supabase import Client

from staybook.adapters.supabase_support import execute, first_row
from staybook.domain.places import PlaceDraft, PlaceRecord
from staybook.services.places import PlaceRepository

PLACE_COLUMNS = (
    "id, owner_id, title, address, photos, description, perks, extra_info, "
    "check_in, check_out, max_guests, price"
)


@dataclass
class SupabasePlaceRepository(PlaceRepository):
    """Supabase implementation for places."""

    client: Client

    def create_place(self, owner_id: UUID, draft: PlaceDraft) -> PlaceRecord:
        """Insert a place row owned by ``owner_id``."""
        payload = {"owner_id": str(owner_id), **_draft_payload(draft)}
        response = execute(
            self.client.table("places").insert(payload), "create place"
        )
        return row_to_place(first_row(response, "create place"))

    def get_place(self, place_id: UUID) -> PlaceRecord | None:
        """Return a place by id, if present."""
        response = execute(
            self.client.table("places")
            .select(PLACE_COLUMNS)
            .eq("id", str(place_id))
            .limit(1),
            "find place",
        )
        if not response.data:
            return None
        return row_to_place(response.data[0])

    def list_places(self) -> list[PlaceRecord]:
        """Return all places, oldest first."""
        response = execute(
            self.client.table("places").select(PLACE_COLUMNS).order("created_at"),
            "list places",
        )
        return [row_to_place(row) for row in response.data or []]

    def list_places_by_owner(self, owner_id: UUID) -> list[PlaceRecord]:
        """Return places owned by a user, oldest first."""
        response = execute(
            self.client.table("places")
            .select(PLACE_COLUMNS)
            .eq("owner_id", str(owner_id))
            .order("created_at"),
            "list places",
        )
        return [row_to_place(row) for row in response.data or []]

    def update_place(self, place_id: UUID, draft: PlaceDraft) -> PlaceRecord:
        """Overwrite the editable columns of a place."""
        response = execute(
            self.client.table("places")
            .update(_draft_payload(draft))
            .eq("id", str(place_id)),
            "update place",
        )
        return row_to_place(first_row(response, "update place"))


def _draft_payload(draft: PlaceDraft) -> dict[str, object]:
    return {
        "title": draft.title,
        "address": draft.address,
        "photos": list(draft.photos),
        "description": draft.description,
        "perks": list(draft.perks),
        "extra_info": draft.extra_info,
        "check_in": draft.check_in,
        "check_out": draft.check_out,
        "max_guests": draft.max_guests,
        "price": draft.price,
    }


def row_to_place(row: dict[str, Any]) -> PlaceRecord:
    """Build a ``PlaceRecord`` from a ``places`` row."""
    price = row.get("price")
    return PlaceRecord(
        id=UUID(row["id"]),
        owner_id=UUID(row["owner_id"]),
        title=row.get("title"),
        address=row.get("address"),
        photos=tuple(row.get("photos") or ()),
        description=row.get("description"),
        perks=tuple(row.get("perks") or ()),
        extra_info=row.get("extra_info"),
        check_in=row.get("check_in"),
        check_out=row.get("check_out"),
        max_guests=row.get("max_guests"),
        price=float(price) if price is not None else None,
    )
