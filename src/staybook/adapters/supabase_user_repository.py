"""Supabase-backed user repository."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from supabase import Client

from staybook.adapters.supabase_support import execute, first_row
from staybook.domain.models import UserRecord
from staybook.errors import EmailTakenError
from staybook.services.users import UserRepository

_USER_COLUMNS = "id, name, email, password_hash"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Create a new user row and return it."""
        response = execute(
            self.client.table("users").insert(
                {"name": name, "email": email, "password_hash": password_hash}
            ),
            "create user",
            conflict_error=EmailTakenError(),
        )
        return _row_to_user(first_row(response, "create user"))

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user for an email, if present."""
        response = execute(
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("email", email)
            .limit(1),
            "find user",
        )
        if response.data:
            return _row_to_user(response.data[0])
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = execute(
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1),
            "find user",
        )
        if response.data:
            return _row_to_user(response.data[0])
        return None


def _row_to_user(row: dict[str, Any]) -> UserRecord:
    return UserRecord(
        id=UUID(row["id"]),
        name=row["name"],
        email=row["email"],
        password_hash=row["password_hash"],
    )
