# ============================================================================
# FILE: mixtape/core/logging.py
# ============================================================================
import logging
from mixtape.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

def setup_logging() -> None:
    """Configure root logging once for the whole process"""
    level = logging.DEBUG if settings.DEBUG else getattr(
        logging, settings.LOG_LEVEL.upper(), logging.INFO
    )
    logging.basicConfig(level=level, format=LOG_FORMAT)
    
    # SQL echo only when debugging
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
