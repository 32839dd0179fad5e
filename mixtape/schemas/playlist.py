# ============================================================================
# FILE: mixtape/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

class PlaylistWrite(BaseModel):
    """Schema for creating or renaming a playlist"""
    nombre: Optional[str] = None

class SongCreate(BaseModel):
    """Schema for adding a song reference to a playlist"""
    titulo: Optional[str] = None
    artista: Optional[str] = None
    ruta: Optional[str] = None
    duration: Optional[int] = None

class SongResponse(BaseModel):
    id: int
    titulo: Optional[str] = None
    artista: Optional[str] = None
    ruta: Optional[str] = None
    duration: Optional[int] = None
    orden: int
    
    class Config:
        from_attributes = True

class PlaylistResponse(BaseModel):
    id: int
    nombre: str
    created_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True

class PlaylistEnvelope(BaseModel):
    playlist: PlaylistResponse

class PlaylistList(BaseModel):
    playlists: List[PlaylistResponse] = []

class PlaylistDetail(BaseModel):
    playlist: PlaylistResponse
    canciones: List[SongResponse] = []

class SongEnvelope(BaseModel):
    song: SongResponse

class OkResponse(BaseModel):
    ok: bool = True
