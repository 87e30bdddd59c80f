"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel

from feed.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
    UserInfo,
)
from feed.config import Settings
from feed.domain.error import DomainError, NotFoundError
from feed.interface.api.security import extract_token
from feed.interface.error import http_error
from feed.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: UserInfo | None = None


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    # Cross-site in production (separate frontend host), same-origin in development
    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> RegisterResponse:
    """Create an account and sign it in.

    Args:
        request: Names, email, password and its confirmation
        response: FastAPI response (receives the auth cookie)
        register_use_case: Register use case from DI
        settings: Application settings from DI

    Returns:
        The new user and their token

    Raises:
        HTTPException: 409 if the email is taken
    """
    try:
        result = await register_use_case.execute(request)
    except DomainError as e:
        raise http_error(e, "Registration")

    _set_auth_cookie(response, result.token, settings)
    logger.info(f"User registered: {result.user.id}")
    return result


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with email and password.

    Sets an HTTP-only auth cookie and also returns the token for clients
    that send it as a bearer header.

    Raises:
        HTTPException: 422 if the credentials are incorrect
    """
    try:
        result = await login_use_case.execute(request)
    except DomainError as e:
        raise http_error(e, "Login")

    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie.

    Tokens are stateless, so logging out only drops the cookie.
    """
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it returns
    authenticated=false instead of raising an error.
    """
    token = extract_token(request, settings.auth.cookie_name)
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except (JWTError, NotFoundError):
        return AuthStatusResponse(authenticated=False)
    except ValueError as e:
        logger.warning(f"Malformed user id in token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token"
        )
