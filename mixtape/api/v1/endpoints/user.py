# ============================================================================
# FILE: mixtape/api/v1/endpoints/user.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from mixtape.db.session import get_db
from mixtape.api.dependencies import require_current_user
from mixtape.core.exceptions import InvalidToken
from mixtape.core.security import create_access_token
from mixtape.schemas.user import AuthResponse, Credentials, MeResponse, TokenClaims, UserDetail, UserPublic
from mixtape.services.user_service import user_service
from mixtape.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        user=UserPublic.model_validate(user),
        token=create_access_token(user.id, user.username),
    )

@router.post("/register", response_model=AuthResponse)
def register(body: Credentials = Credentials(), db: Session = Depends(get_db)):
    """
    Register a new user account
    Returns the user and a token, so the client is logged in right away
    """
    user = user_service.register(db, body.username, body.password)
    return _auth_response(user)

@router.post("/login", response_model=AuthResponse)
def login(body: Credentials = Credentials(), db: Session = Depends(get_db)):
    """
    Login with username and password
    Returns JWT access token
    """
    user = user_service.verify(db, body.username, body.password)
    logger.info(f"User logged in: {user.id}")
    return _auth_response(user)

@router.get("/me", response_model=MeResponse)
def get_current_user_info(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(require_current_user)
):
    """
    Get current user information
    Requires authentication
    """
    user = user_service.get_user(db, claims.id)
    if not user:
        # Token outlived its account
        raise InvalidToken()
    return MeResponse(user=UserDetail.model_validate(user))
