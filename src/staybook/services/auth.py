"""Request authentication gate."""

from dataclasses import dataclass

from staybook.domain.models import Identity
from staybook.errors import UnauthenticatedError
from staybook.services.tokens import TokenService


@dataclass
class AuthorizationGate:
    """Turns a raw request credential into an authenticated identity."""

    token_service: TokenService

    def authenticate(self, credential: str | None) -> Identity:
        """Return the caller identity or raise.

        A missing or empty credential raises ``UnauthenticatedError``; a
        credential that fails verification raises ``InvalidTokenError``.
        """
        if not credential:
            raise UnauthenticatedError()
        return self.token_service.verify(credential).to_identity()
