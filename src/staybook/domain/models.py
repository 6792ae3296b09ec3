"""Domain models for users and authentication."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class Identity:
    """Authenticated caller attached to a request."""

    user_id: UUID
    email: str


@dataclass(frozen=True)
class Claims:
    """Identity data embedded in a session token."""

    user_id: UUID
    email: str
    issued_at: datetime
    expires_at: datetime | None = None

    def to_identity(self) -> Identity:
        return Identity(user_id=self.user_id, email=self.email)
