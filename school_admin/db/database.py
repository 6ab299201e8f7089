# /school_admin/db/database.py

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ..config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)

# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=SQL_ECHO, **engine_args)

# Each instance of this class will be a database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """
    Creates every table and index that does not exist yet. Called once during
    application startup rather than lazily per request.
    """
    # Importing the registry attaches all models to Base.metadata.
    from .base import Base

    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("Database schema ready (%s)", target.url.render_as_string(hide_password=True))


# Dependency to get a DB session. The session is released whether the
# request succeeded or failed.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
