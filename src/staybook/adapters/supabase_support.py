"""Shared helpers for Supabase adapters."""

import logging
from typing import Any, Protocol

from postgrest.exceptions import APIError

from staybook.errors import PersistenceError, StaybookError

_logger = logging.getLogger(__name__)

# Postgres SQLSTATE for a unique index violation.
UNIQUE_VIOLATION = "23505"


class _Executable(Protocol):
    def execute(self) -> Any: ...


def execute(
    query: _Executable, action: str, conflict_error: StaybookError | None = None
) -> Any:
    """Run a PostgREST query, mapping API failures to ``PersistenceError``.

    When ``conflict_error`` is given, a unique violation raises it instead.
    """
    try:
        return query.execute()
    except APIError as exc:
        if conflict_error is not None and exc.code == UNIQUE_VIOLATION:
            raise conflict_error from exc
        _logger.exception("Supabase query failed: action=%s", action)
        raise PersistenceError(f"Failed to {action}") from exc


def first_row(response: Any, action: str) -> dict[str, Any]:
    """Return the first row of a write response or raise."""
    if not response.data:
        raise PersistenceError(f"Failed to {action}")
    return response.data[0]
