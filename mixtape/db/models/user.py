# ============================================================================
# FILE: mixtape/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from mixtape.db.base import Base

class User(Base):
    """Registered account; never mutated after creation"""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    
    # Relationships
    playlists = relationship("Playlist", back_populates="user", passive_deletes=True)

    def __repr__(self):
        return f"<User {self.username}>"
