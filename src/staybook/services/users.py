"""User registration, login and profile lookup."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from staybook.domain.models import Identity, UserRecord
from staybook.errors import EmailTakenError, IncorrectPasswordError, NotFoundError
from staybook.services.passwords import PasswordHasher
from staybook.services.tokens import TokenService

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the given email, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""


@dataclass(frozen=True)
class LoginResult:
    """A logged-in user together with its session token."""

    user: UserRecord
    token: str


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    password_hasher: PasswordHasher
    token_service: TokenService

    def register(self, name: str, email: str, password: str) -> UserRecord:
        """Create a user with a salted password hash."""
        normalized = normalize_email(email)
        if self.repository.get_by_email(normalized) is not None:
            raise EmailTakenError()
        user = self.repository.create_user(
            name=name.strip(),
            email=normalized,
            password_hash=self.password_hasher.hash(password),
        )
        _logger.info("Registered user: user_id=%s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> UserRecord:
        """Check credentials and return the matching user."""
        user = self.repository.get_by_email(normalize_email(email))
        if user is None:
            raise NotFoundError("User not found")
        if not self.password_hasher.verify(password, user.password_hash):
            _logger.info("Login rejected: user_id=%s", user.id)
            raise IncorrectPasswordError()
        return user

    def login(self, email: str, password: str) -> LoginResult:
        """Authenticate and issue a session token."""
        user = self.authenticate(email, password)
        token = self.token_service.issue(Identity(user_id=user.id, email=user.email))
        _logger.info("Login succeeded: user_id=%s", user.id)
        return LoginResult(user=user, token=token)

    def get_profile(self, identity: Identity) -> UserRecord:
        """Return the stored user behind an authenticated identity."""
        user = self.repository.get_by_id(identity.user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user


def normalize_email(email: str) -> str:
    """Return the canonical form used for storage and lookup."""
    return email.strip().lower()
