# ============================================================================
# FILE: mixtape/api/dependencies.py
# ============================================================================
from fastapi import Depends
from fastapi.security import APIKeyHeader
from mixtape.core.exceptions import InvalidToken, Unauthenticated
from mixtape.core.security import decode_access_token
from mixtape.schemas.user import TokenClaims
from typing import Optional

authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

def require_current_user(
    authorization: Optional[str] = Depends(authorization_header)
) -> TokenClaims:
    """
    Require a valid bearer token and return its claims.
    Raises Unauthenticated when the Authorization header is absent and
    InvalidToken for anything else that does not verify: another scheme,
    an empty credential, a forged or expired token.
    Use this dependency for protected endpoints.
    """
    if authorization is None:
        raise Unauthenticated()
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidToken()
    return decode_access_token(token.strip())
