"""Photo upload endpoints."""

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from staybook.api.dependencies import get_container
from staybook.api.schemas import UploadByLinkRequest
from staybook.containers import AppContainer

router = APIRouter(tags=["uploads"])


@router.post("/upload-by-link")
async def upload_by_link(
    payload: UploadByLinkRequest, container: AppContainer = Depends(get_container)
) -> str:
    """Download a photo from a URL into the uploads directory."""
    return await container.photo_service.upload_by_link(payload.link)


@router.post("/upload")
async def upload(
    photos: list[UploadFile] = File(...),
    container: AppContainer = Depends(get_container),
) -> list[str]:
    """Store uploaded photos and return their new names."""
    files = [(photo.filename or "", await photo.read()) for photo in photos]
    return await run_in_threadpool(container.photo_service.upload_files, files)
