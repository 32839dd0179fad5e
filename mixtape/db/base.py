# ============================================================================
# FILE: mixtape/db/base.py
# ============================================================================
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import models so Base.metadata knows every table
from mixtape.db.models import user, playlist  # noqa: E402,F401
