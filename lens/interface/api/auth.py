"""Bearer token authentication for API routes."""

from fastapi import status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from lens.domain.service import JWTService
from lens.interface.error import http_error
from lens.util.jwt import JWTError, TokenPayload

# auto_error=False so a missing token yields our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


def authenticate(
    credentials: HTTPAuthorizationCredentials | None, jwt_service: JWTService
) -> TokenPayload:
    """Resolve the acting user from an ``Authorization: Bearer`` header.

    Args:
        credentials: Parsed bearer credentials, None if the header is absent
        jwt_service: JWT service for token verification

    Returns:
        Verified token payload

    Raises:
        HTTPException: 401 if no token was sent, 403 if it does not verify
    """
    if credentials is None or not credentials.credentials:
        raise http_error(status.HTTP_401_UNAUTHORIZED, "Access token required")

    try:
        return jwt_service.verify_token(credentials.credentials)
    except JWTError:
        raise http_error(status.HTTP_403_FORBIDDEN, "Invalid or expired token")
