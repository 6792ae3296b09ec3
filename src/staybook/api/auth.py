"""Registration, login, profile and logout endpoints."""

from fastapi import APIRouter, Depends, Response, status

from staybook.api.dependencies import get_container, require_identity
from staybook.api.schemas import LoginRequest, RegisterRequest, UserResponse
from staybook.containers import AppContainer
from staybook.domain.models import Identity

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest, container: AppContainer = Depends(get_container)
) -> UserResponse:
    """Create an account."""
    user = container.user_service.register(
        name=payload.name, email=payload.email, password=payload.password
    )
    return UserResponse.from_record(user)


@router.post("/login")
def login(
    payload: LoginRequest,
    response: Response,
    container: AppContainer = Depends(get_container),
) -> UserResponse:
    """Check credentials and set the session cookie."""
    result = container.user_service.login(payload.email, payload.password)
    settings = container.settings
    response.set_cookie(
        settings.cookie_name,
        result.token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return UserResponse.from_record(result.user)


@router.get("/profile")
def profile(
    identity: Identity = Depends(require_identity),
    container: AppContainer = Depends(get_container),
) -> UserResponse:
    """Return the logged-in user's profile."""
    return UserResponse.from_record(container.user_service.get_profile(identity))


@router.post("/logout")
def logout(
    response: Response, container: AppContainer = Depends(get_container)
) -> bool:
    """Clear the session cookie."""
    settings = container.settings
    response.set_cookie(
        settings.cookie_name,
        "",
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return True
