# ============================================================================
# FILE: mixtape/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from mixtape.config import settings
from mixtape.core.exceptions import DuplicateUsername, InvalidInput, NoSuchUser, WrongPassword
from mixtape.core.security import get_password_hash, verify_password
from mixtape.db.models.user import User
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Credential store: username -> password hash"""
    
    def register(self, db: Session, username: Optional[str], password: Optional[str]) -> User:
        """
        Create a new account.
        Raises InvalidInput for a missing username or a short password,
        DuplicateUsername when the username is taken.
        """
        if not username or not password or len(password) < settings.MIN_PASSWORD_LENGTH:
            raise InvalidInput(f"username y password (>={settings.MIN_PASSWORD_LENGTH})")
        
        user = User(username=username, password_hash=get_password_hash(password))
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            # Unique index on username
            db.rollback()
            logger.info(f"Registration rejected, username taken: {username}")
            raise DuplicateUsername()
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise
        logger.info(f"User created: {user.id} ({user.username})")
        return user
    
    def verify(self, db: Session, username: Optional[str], password: Optional[str]) -> User:
        """Check credentials; NoSuchUser and WrongPassword are kept apart for messaging"""
        user = self.get_user_by_username(db, username) if username else None
        if not user:
            raise NoSuchUser()
        if not password or not verify_password(password, user.password_hash):
            raise WrongPassword()
        return user
    
    def get_user(self, db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()
    
    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()

# Create singleton instance
user_service = UserService()
