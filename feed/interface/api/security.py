"""Request authentication helpers.

The token is read from the auth cookie set at login, or from an
``Authorization: Bearer`` header for non-browser clients.
"""

from fastapi import HTTPException, Request, status

from feed.domain.service import JWTService


def extract_token(request: Request, cookie_name: str) -> str | None:
    """Find the JWT on a request.

    Args:
        request: Incoming request
        cookie_name: Name of the auth cookie

    Returns:
        The raw token, or None if the request carries none
    """
    token = request.cookies.get(cookie_name)
    if token:
        return token

    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def require_user_id(request: Request, jwt_service: JWTService, action: str) -> str:
    """Resolve the authenticated user's ID or reject the request.

    Args:
        request: Incoming request
        jwt_service: JWT service for token verification
        action: What the caller is trying to do (used in the error detail)

    Returns:
        The user ID from a valid token

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    token = extract_token(request, jwt_service.auth_settings.cookie_name)
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
