# ============================================================================
# FILE: mixtape/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from mixtape.api.v1.endpoints import playlist, user

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(user.router, tags=["user"])
api_router.include_router(playlist.router, prefix="/playlists", tags=["playlist"])
