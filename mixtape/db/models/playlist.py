# ============================================================================
# FILE: mixtape/db/models/playlist.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from mixtape.db.base import Base

class Playlist(Base):
    """Playlist owned by exactly one user"""
    __tablename__ = "playlists"
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    nombre = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    
    # Relationships
    user = relationship("User", back_populates="playlists")
    songs = relationship(
        "PlaylistSong",
        back_populates="playlist",
        order_by="PlaylistSong.orden",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Playlist {self.id} {self.nombre}>"

class PlaylistSong(Base):
    """Song reference inside a playlist; the file itself lives elsewhere"""
    __tablename__ = "playlist_songs"
    
    id = Column(Integer, primary_key=True, index=True)
    playlist_id = Column(Integer, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True)
    titulo = Column(String, nullable=True)
    artista = Column(String, nullable=True)
    ruta = Column(String, nullable=True)  # Path or URL to the audio file
    duration = Column(Integer, nullable=True)  # Seconds
    orden = Column(Integer, default=0, nullable=False)
    
    # Relationships
    playlist = relationship("Playlist", back_populates="songs")
