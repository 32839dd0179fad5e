# ============================================================================
# FILE: mixtape/core/security.py
# ============================================================================
from datetime import datetime, timedelta, timezone
from typing import Optional
import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError
from mixtape.config import settings
from mixtape.core.exceptions import InvalidToken, TokenExpired
from mixtape.schemas.user import TokenClaims

# bcrypt only looks at the first 72 bytes; newer releases refuse longer input
BCRYPT_MAX_BYTES = 72

def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]

def get_password_hash(password: str) -> str:
    """Hash a raw password with bcrypt using the configured cost"""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a raw password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash in the store
        return False

def create_access_token(user_id: int, username: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed token carrying the user identity.
    Expires after ACCESS_TOKEN_EXPIRE_DAYS unless expires_delta is given.
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"id": user_id, "username": username, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> TokenClaims:
    """
    Verify signature and expiry of a token and return its claims.
    Raises TokenExpired or InvalidToken.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpired()
    except JWTError:
        raise InvalidToken()
    
    try:
        return TokenClaims.model_validate(payload)
    except ValidationError:
        raise InvalidToken()
