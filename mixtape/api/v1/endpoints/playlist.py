# ============================================================================
# FILE: mixtape/api/v1/endpoints/playlist.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from mixtape.db.session import get_db
from mixtape.api.dependencies import require_current_user
from mixtape.schemas.playlist import (
    OkResponse,
    PlaylistDetail,
    PlaylistEnvelope,
    PlaylistList,
    PlaylistResponse,
    PlaylistWrite,
    SongCreate,
    SongEnvelope,
    SongResponse
)
from mixtape.schemas.user import TokenClaims
from mixtape.services.playlist_service import playlist_service

router = APIRouter()

def _parse_id(value: str) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        return None

@router.get("", response_model=PlaylistList)
def list_playlists(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(require_current_user)
):
    """Get all playlists of the current user, newest first"""
    playlists = playlist_service.list_playlists(db, claims.id)
    return PlaylistList(playlists=[PlaylistResponse.model_validate(p) for p in playlists])

@router.post("", response_model=PlaylistEnvelope)
def create_playlist(
    body: PlaylistWrite = PlaylistWrite(),
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(require_current_user)
):
    playlist = playlist_service.create_playlist(db, claims.id, body.nombre)
    return PlaylistEnvelope(playlist=PlaylistResponse.model_validate(playlist))

@router.get("/{playlist_id}", response_model=PlaylistDetail)
def get_playlist(
    playlist_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(require_current_user)
):
    """
    Get a playlist with its songs
    Someone else's playlist answers 404, same as a missing one
    """
    playlist, songs = playlist_service.get_playlist(db, claims.id, playlist_id)
    return PlaylistDetail(
        playlist=PlaylistResponse.model_validate(playlist),
        canciones=[SongResponse.model_validate(s) for s in songs]
    )

@router.put("/{playlist_id}", response_model=PlaylistEnvelope)
def rename_playlist(
    playlist_id: int,
    body: PlaylistWrite = PlaylistWrite(),
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(require_current_user)
):
    playlist = playlist_service.rename_playlist(db, claims.id, playlist_id, body.nombre)
    return PlaylistEnvelope(playlist=PlaylistResponse.model_validate(playlist))

@router.delete("/{playlist_id}", response_model=OkResponse)
def delete_playlist(
    playlist_id: str,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(require_current_user)
):
    """Delete a playlist and its songs; succeeds even if nothing matched"""
    pl_id = _parse_id(playlist_id)
    if pl_id is not None:
        playlist_service.delete_playlist(db, claims.id, pl_id)
    return OkResponse()

@router.post("/{playlist_id}/songs", response_model=SongEnvelope)
def add_song(
    playlist_id: int,
    body: SongCreate = SongCreate(),
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(require_current_user)
):
    song = playlist_service.add_song(db, claims.id, playlist_id, body)
    return SongEnvelope(song=SongResponse.model_validate(song))

@router.delete("/{playlist_id}/songs/{song_id}", response_model=OkResponse)
def delete_song(
    playlist_id: str,
    song_id: str,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(require_current_user)
):
    """Remove one song; ids that match nothing are not an error"""
    pl_id, s_id = _parse_id(playlist_id), _parse_id(song_id)
    if pl_id is not None and s_id is not None:
        playlist_service.delete_song(db, claims.id, pl_id, s_id)
    return OkResponse()

@router.delete("/{playlist_id}/songs", response_model=OkResponse)
def clear_songs(
    playlist_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(require_current_user)
):
    """Remove every song from a playlist"""
    playlist_service.clear_songs(db, claims.id, playlist_id)
    return OkResponse()
