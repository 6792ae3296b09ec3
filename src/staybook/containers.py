"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from supabase import create_client

from staybook.adapters.image_downloader import HttpxImageDownloader
from staybook.adapters.local_photo_storage import LocalPhotoStorage
from staybook.adapters.supabase_booking_repository import SupabaseBookingRepository
from staybook.adapters.supabase_place_repository import SupabasePlaceRepository
from staybook.adapters.supabase_user_repository import SupabaseUserRepository
from staybook.config import Settings
from staybook.services.auth import AuthorizationGate
from staybook.services.bookings import BookingService
from staybook.services.passwords import PasswordHasher
from staybook.services.photos import PhotoService
from staybook.services.places import PlaceService
from staybook.services.tokens import TokenService
from staybook.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    authorization_gate: AuthorizationGate
    place_service: PlaceService
    booking_service: BookingService
    photo_service: PhotoService
    close_resources: Callable[[], Awaitable[None]]


def build_token_service(settings: Settings) -> TokenService:
    """Create the token service from settings."""
    ttl = (
        timedelta(minutes=settings.token_ttl_minutes)
        if settings.token_ttl_minutes
        else None
    )
    return TokenService(
        secret=settings.jwt_secret, algorithm=settings.jwt_algorithm, ttl=ttl
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    place_repository = SupabasePlaceRepository(supabase_client)
    booking_repository = SupabaseBookingRepository(supabase_client)
    token_service = build_token_service(resolved_settings)
    user_service = UserService(
        repository=user_repository,
        password_hasher=PasswordHasher(rounds=resolved_settings.bcrypt_rounds),
        token_service=token_service,
    )
    image_downloader = HttpxImageDownloader.create()
    photo_service = PhotoService(
        downloader=image_downloader,
        storage=LocalPhotoStorage.create(Path(resolved_settings.uploads_dir)),
    )

    async def close_resources() -> None:
        await image_downloader.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        authorization_gate=AuthorizationGate(token_service),
        place_service=PlaceService(place_repository),
        booking_service=BookingService(
            repository=booking_repository, place_repository=place_repository
        ),
        photo_service=photo_service,
        close_resources=close_resources,
    )
