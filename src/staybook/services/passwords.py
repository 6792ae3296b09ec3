"""Salted password hashing."""

from dataclasses import dataclass

import bcrypt

from staybook.errors import ValidationError

# bcrypt only looks at the first 72 bytes of input.
_MAX_PASSWORD_BYTES = 72


@dataclass
class PasswordHasher:
    """bcrypt-backed password hasher."""

    rounds: int = 10

    def hash(self, password: str) -> str:
        """Return a salted hash for the password."""
        raw = password.encode("utf-8")
        if len(raw) > _MAX_PASSWORD_BYTES:
            raise ValidationError("Password is too long")
        return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return true when the password matches the stored hash."""
        raw = password.encode("utf-8")
        if len(raw) > _MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(raw, password_hash.encode("utf-8"))
        except ValueError:
            return False
