# ============================================================================
# FILE: mixtape/services/playlist_service.py
# ============================================================================
from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from mixtape.core.exceptions import InvalidInput, NotFound
from mixtape.db.models.playlist import Playlist, PlaylistSong
from mixtape.schemas.playlist import SongCreate
import logging

logger = logging.getLogger(__name__)

class PlaylistService:
    """
    Playlist store. Every method filters by the requesting user's id, so a
    playlist owned by someone else behaves exactly like a missing one.
    """
    
    def _get_owned(self, db: Session, user_id: int, playlist_id: int) -> Optional[Playlist]:
        return db.query(Playlist).filter(
            Playlist.id == playlist_id,
            Playlist.user_id == user_id
        ).first()
    
    def _require_owned(self, db: Session, user_id: int, playlist_id: int, message: str = None) -> Playlist:
        playlist = self._get_owned(db, user_id, playlist_id)
        if not playlist:
            raise NotFound(message)
        return playlist
    
    @staticmethod
    def _clean_name(name: Optional[str]) -> str:
        if name is None or not name.strip():
            raise InvalidInput("Nombre requerido")
        return name.strip()
    
    def list_playlists(self, db: Session, user_id: int) -> List[Playlist]:
        """Get all playlists for a user, newest first"""
        return db.query(Playlist).filter(
            Playlist.user_id == user_id
        ).order_by(Playlist.created_at.desc(), Playlist.id.desc()).all()
    
    def create_playlist(self, db: Session, user_id: int, name: Optional[str]) -> Playlist:
        """Create a new playlist for a user"""
        nombre = self._clean_name(name)
        try:
            playlist = Playlist(user_id=user_id, nombre=nombre)
            db.add(playlist)
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist created: {playlist.id} for user {user_id}")
            return playlist
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise
    
    def get_playlist(self, db: Session, user_id: int, playlist_id: int) -> Tuple[Playlist, List[PlaylistSong]]:
        """Get an owned playlist together with its songs in order"""
        playlist = self._require_owned(db, user_id, playlist_id)
        songs = db.query(PlaylistSong).filter(
            PlaylistSong.playlist_id == playlist.id
        ).order_by(PlaylistSong.orden, PlaylistSong.id).all()
        return playlist, songs
    
    def rename_playlist(self, db: Session, user_id: int, playlist_id: int, name: Optional[str]) -> Playlist:
        """Rename an owned playlist"""
        nombre = self._clean_name(name)
        playlist = self._require_owned(db, user_id, playlist_id)
        try:
            playlist.nombre = nombre
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist renamed: {playlist_id}")
            return playlist
        except Exception as e:
            db.rollback()
            logger.error(f"Error renaming playlist: {e}")
            raise
    
    def delete_playlist(self, db: Session, user_id: int, playlist_id: int) -> bool:
        """
        Delete an owned playlist; its songs go with it through the FK cascade.
        A missing or foreign id deletes nothing and is not an error.
        """
        try:
            deleted = db.query(Playlist).filter(
                Playlist.id == playlist_id,
                Playlist.user_id == user_id
            ).delete(synchronize_session=False)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise
        if deleted:
            logger.info(f"Playlist deleted: {playlist_id}")
        return bool(deleted)
    
    def add_song(self, db: Session, user_id: int, playlist_id: int, song_data: SongCreate) -> PlaylistSong:
        """Append a song reference to an owned playlist"""
        playlist = self._require_owned(db, user_id, playlist_id, "Playlist no encontrada")
        
        # Append at the end: max + 1, or 0 for an empty playlist
        current_max = db.query(func.max(PlaylistSong.orden)).filter(
            PlaylistSong.playlist_id == playlist.id
        ).scalar()
        orden = 0 if current_max is None else current_max + 1
        
        try:
            song = PlaylistSong(
                playlist_id=playlist.id,
                titulo=song_data.titulo,
                artista=song_data.artista,
                ruta=song_data.ruta,
                duration=song_data.duration,
                orden=orden
            )
            db.add(song)
            db.commit()
            db.refresh(song)
            logger.info(f"Song {song.id} added to playlist {playlist_id} at {orden}")
            return song
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding song to playlist: {e}")
            raise
    
    def delete_song(self, db: Session, user_id: int, playlist_id: int, song_id: int) -> bool:
        """Remove one song; only when the playlist is owned and the song belongs to it"""
        if not self._get_owned(db, user_id, playlist_id):
            return False
        try:
            deleted = db.query(PlaylistSong).filter(
                PlaylistSong.id == song_id,
                PlaylistSong.playlist_id == playlist_id
            ).delete(synchronize_session=False)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error removing song from playlist: {e}")
            raise
        if deleted:
            logger.info(f"Song {song_id} removed from playlist {playlist_id}")
        return bool(deleted)
    
    def clear_songs(self, db: Session, user_id: int, playlist_id: int) -> int:
        """Remove every song of an owned playlist"""
        playlist = self._require_owned(db, user_id, playlist_id, "Playlist no encontrada")
        try:
            deleted = db.query(PlaylistSong).filter(
                PlaylistSong.playlist_id == playlist.id
            ).delete(synchronize_session=False)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error clearing playlist: {e}")
            raise
        logger.info(f"Playlist {playlist_id} cleared ({deleted} songs)")
        return deleted

# Create singleton instance
playlist_service = PlaylistService()
