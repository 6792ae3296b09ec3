"""Error taxonomy shared by services and the HTTP layer."""


class StaybookError(Exception):
    """Base class for expected application errors."""

    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class UnauthenticatedError(StaybookError):
    """No credential was presented."""

    default_message = "Unauthorized"


class ForbiddenError(StaybookError):
    """The caller is identified but not allowed to proceed."""

    default_message = "Forbidden"


class InvalidTokenError(ForbiddenError):
    """Token signature, structure or expiry check failed."""

    default_message = "Invalid token"


class OwnershipError(ForbiddenError):
    """The caller does not own the resource it tries to mutate."""

    default_message = "Unauthorized"


class IncorrectPasswordError(ForbiddenError):
    """Password does not match the stored hash."""

    default_message = "Incorrect password"


class NotFoundError(StaybookError):
    """A resource looked up by id or key does not exist."""

    default_message = "Not found"


class ValidationError(StaybookError):
    """Input is well-formed JSON but not acceptable."""

    default_message = "Invalid input"


class EmailTakenError(ValidationError):
    """Registration with an email that already exists."""

    default_message = "Email already registered"


class PersistenceError(StaybookError):
    """Unexpected failure in the persistence layer."""


class PhotoDownloadError(StaybookError):
    """Fetching a remote image failed."""

    default_message = "Failed to download image"
