"""Stateless session tokens."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from staybook.domain.models import Claims, Identity
from staybook.errors import InvalidTokenError

_logger = logging.getLogger(__name__)

_REQUIRED_CLAIMS = ["id", "email", "iat"]


@dataclass
class TokenService:
    """Issues and verifies signed JWT session tokens.

    Tokens carry the user id, email and issue time. When ``ttl`` is set an
    ``exp`` claim is added and enforced on verification; otherwise tokens do
    not expire.
    """

    secret: str
    algorithm: str = "HS256"
    ttl: timedelta | None = None

    def issue(self, identity: Identity) -> str:
        """Return a signed token for the identity."""
        now = datetime.now(tz=UTC)
        payload: dict[str, object] = {
            "id": str(identity.user_id),
            "email": identity.email,
            "iat": now,
        }
        if self.ttl is not None:
            payload["exp"] = now + self.ttl
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Claims:
        """Decode a token and return its claims.

        Raises:
            InvalidTokenError: bad signature, malformed token, missing or
                ill-typed claims, or an expired token.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            _logger.info("Rejected token: %s", type(exc).__name__)
            raise InvalidTokenError() from exc

        email = payload["email"]
        if not isinstance(email, str) or not email:
            raise InvalidTokenError()
        try:
            user_id = UUID(str(payload["id"]))
        except ValueError as exc:
            raise InvalidTokenError() from exc

        expires_at = payload.get("exp")
        return Claims(
            user_id=user_id,
            email=email,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
            expires_at=datetime.fromtimestamp(expires_at, tz=UTC)
            if expires_at is not None
            else None,
        )
