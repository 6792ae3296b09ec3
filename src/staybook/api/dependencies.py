"""FastAPI dependencies shared by the routers."""

from fastapi import Depends, Request

from staybook.containers import AppContainer
from staybook.domain.models import Identity


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def require_identity(
    request: Request, container: AppContainer = Depends(get_container)
) -> Identity:
    """Authenticate the request from its token cookie.

    Runs before the route body, so rejected requests never reach a repository.
    """
    credential = request.cookies.get(container.settings.cookie_name)
    return container.authorization_gate.authenticate(credential)
