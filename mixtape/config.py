# ============================================================================
# FILE: mixtape/config.py
# ============================================================================
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""
    
    # App settings
    APP_NAME: str = "Mixtape Playlist Manager"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    
    # Database
    DATABASE_URL: str = "sqlite:///./database.sqlite"  # Any SQLAlchemy URL works
    
    # Security
    SECRET_KEY: str = Field(
        "cambia_esto_por_una_clave_larga",
        validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET"),
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    BCRYPT_ROUNDS: int = 10
    MIN_PASSWORD_LENGTH: int = 4
    
    # HTTP
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]  # Restrict in production
    
    # Static frontend
    FRONTEND_DIR: str = "frontend"
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
