"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from staybook.api.app import create_app
from staybook.config import Settings
from staybook.containers import AppContainer, build_token_service
from staybook.domain.bookings import BookingDraft, BookingRecord
from staybook.domain.models import UserRecord
from staybook.domain.places import PlaceDraft, PlaceRecord
from staybook.services.auth import AuthorizationGate
from staybook.services.bookings import BookingRepository, BookingService
from staybook.services.passwords import PasswordHasher
from staybook.services.photos import ImageDownloader, PhotoService, PhotoStorage
from staybook.services.places import PlaceRepository, PlaceService
from staybook.services.tokens import TokenService
from staybook.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)
    lookups: int = 0

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        user = UserRecord(
            id=uuid4(), name=name, email=email, password_hash=password_hash
        )
        self.users[user.id] = user
        return user

    def get_by_email(self, email: str) -> UserRecord | None:
        self.lookups += 1
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        self.lookups += 1
        return self.users.get(user_id)


@dataclass
class InMemoryPlaceRepository(PlaceRepository):
    """In-memory place repository for tests."""

    places: dict[UUID, PlaceRecord] = field(default_factory=dict)
    writes: int = 0

    def create_place(self, owner_id: UUID, draft: PlaceDraft) -> PlaceRecord:
        self.writes += 1
        place = _place_from_draft(uuid4(), owner_id, draft)
        self.places[place.id] = place
        return place

    def get_place(self, place_id: UUID) -> PlaceRecord | None:
        return self.places.get(place_id)

    def list_places(self) -> list[PlaceRecord]:
        return list(self.places.values())

    def list_places_by_owner(self, owner_id: UUID) -> list[PlaceRecord]:
        return [place for place in self.places.values() if place.owner_id == owner_id]

    def update_place(self, place_id: UUID, draft: PlaceDraft) -> PlaceRecord:
        self.writes += 1
        current = self.places[place_id]
        place = _place_from_draft(current.id, current.owner_id, draft)
        self.places[place_id] = place
        return place


@dataclass
class InMemoryBookingRepository(BookingRepository):
    """In-memory booking repository that expands places on listing."""

    place_repository: InMemoryPlaceRepository
    bookings: dict[UUID, BookingRecord] = field(default_factory=dict)

    def create_booking(self, user_id: UUID, draft: BookingDraft) -> BookingRecord:
        booking = BookingRecord(
            id=uuid4(),
            place_id=draft.place_id,
            user_id=user_id,
            check_in=draft.check_in,
            check_out=draft.check_out,
            number_of_guests=draft.number_of_guests,
            name=draft.name,
            phone=draft.phone,
            price=draft.price,
        )
        self.bookings[booking.id] = booking
        return booking

    def list_bookings_by_user(self, user_id: UUID) -> list[BookingRecord]:
        return [
            replace(booking, place=self.place_repository.get_place(booking.place_id))
            for booking in self.bookings.values()
            if booking.user_id == user_id
        ]


@dataclass
class FakeImageDownloader(ImageDownloader):
    """Image downloader returning static bytes or raising."""

    content: bytes = b"fake-image-bytes"
    error: Exception | None = None
    urls: list[str] = field(default_factory=list)

    async def download(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.content


@dataclass
class InMemoryPhotoStorage(PhotoStorage):
    """Photo storage keeping files in a dict."""

    files: dict[str, bytes] = field(default_factory=dict)

    def save(self, name: str, content: bytes) -> str:
        self.files[name] = content
        return name


def _place_from_draft(
    place_id: UUID, owner_id: UUID, draft: PlaceDraft
) -> PlaceRecord:
    return PlaceRecord(
        id=place_id,
        owner_id=owner_id,
        title=draft.title,
        address=draft.address,
        photos=draft.photos,
        description=draft.description,
        perks=draft.perks,
        extra_info=draft.extra_info,
        check_in=draft.check_in,
        check_out=draft.check_out,
        max_guests=draft.max_guests,
        price=draft.price,
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        jwt_secret="test-jwt-secret-that-is-long-enough-for-hs256",
        bcrypt_rounds=4,
        uploads_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return build_token_service(settings)


@pytest.fixture
def password_hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def place_repository() -> InMemoryPlaceRepository:
    return InMemoryPlaceRepository()


@pytest.fixture
def booking_repository(
    place_repository: InMemoryPlaceRepository,
) -> InMemoryBookingRepository:
    return InMemoryBookingRepository(place_repository=place_repository)


@pytest.fixture
def image_downloader() -> FakeImageDownloader:
    return FakeImageDownloader()


@pytest.fixture
def photo_storage() -> InMemoryPhotoStorage:
    return InMemoryPhotoStorage()


@pytest.fixture
def user_service(
    user_repository: InMemoryUserRepository,
    password_hasher: PasswordHasher,
    token_service: TokenService,
) -> UserService:
    return UserService(
        repository=user_repository,
        password_hasher=password_hasher,
        token_service=token_service,
    )


@pytest.fixture
def container(
    settings: Settings,
    user_service: UserService,
    token_service: TokenService,
    place_repository: InMemoryPlaceRepository,
    booking_repository: InMemoryBookingRepository,
    image_downloader: FakeImageDownloader,
    photo_storage: InMemoryPhotoStorage,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        authorization_gate=AuthorizationGate(token_service),
        place_service=PlaceService(place_repository),
        booking_service=BookingService(
            repository=booking_repository, place_repository=place_repository
        ),
        photo_service=PhotoService(
            downloader=image_downloader, storage=photo_storage
        ),
        close_resources=close_resources,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def register_and_login(
    client: TestClient, name: str, email: str, password: str
) -> dict[str, object]:
    """Register a user through the API, log in, and return the user body."""
    response = client.post(
        "/register", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()
