"""Place endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends

from staybook.api.dependencies import get_container, require_identity
from staybook.api.schemas import PlaceRequest, PlaceResponse, PlaceUpdateRequest
from staybook.containers import AppContainer
from staybook.domain.models import Identity
from staybook.errors import NotFoundError

router = APIRouter(tags=["places"])


@router.get("/places")
def list_places(
    container: AppContainer = Depends(get_container),
) -> list[PlaceResponse]:
    """Return all places. Public."""
    return [
        PlaceResponse.from_record(place)
        for place in container.place_service.list_places()
    ]


@router.get("/places/{place_id}")
def get_place(
    place_id: str, container: AppContainer = Depends(get_container)
) -> PlaceResponse:
    """Return one place. Public. Ids that are not UUIDs match no place."""
    try:
        parsed_id = UUID(place_id)
    except ValueError as exc:
        raise NotFoundError() from exc
    return PlaceResponse.from_record(container.place_service.get_place(parsed_id))


@router.post("/places")
def create_place(
    payload: PlaceRequest,
    identity: Identity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> PlaceResponse:
    """Create a place owned by the caller."""
    place = container.place_service.create_place(identity, payload.to_draft())
    return PlaceResponse.from_record(place)


@router.put("/places")
def update_place(
    payload: PlaceUpdateRequest,
    identity: Identity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> str:
    """Update a place the caller owns."""
    container.place_service.update_place(identity, payload.id, payload.to_draft())
    return "ok"


@router.get("/user-places")
def list_user_places(
    identity: Identity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> list[PlaceResponse]:
    """Return the caller's places."""
    return [
        PlaceResponse.from_record(place)
        for place in container.place_service.list_user_places(identity)
    ]
