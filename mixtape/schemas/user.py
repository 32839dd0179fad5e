# ============================================================================
# FILE: mixtape/schemas/user.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class Credentials(BaseModel):
    """Body of register and login; emptiness is checked by the service"""
    username: Optional[str] = None
    password: Optional[str] = None

class UserPublic(BaseModel):
    """User as returned together with a token"""
    id: int
    username: str
    
    class Config:
        from_attributes = True

class UserDetail(UserPublic):
    """User as returned by /me"""
    created_at: Optional[datetime] = None

class AuthResponse(BaseModel):
    user: UserPublic
    token: str

class MeResponse(BaseModel):
    user: UserDetail

class TokenClaims(BaseModel):
    """Decoded payload of a verified token"""
    id: int
    username: str
    exp: int
