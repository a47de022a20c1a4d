import logging
import os

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.db.Models.models import Base
from app.db.repository import URLStorage

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.DATABASE_URL,
    connect_args={"check_same_thread": False},
    pool_pre_ping=True,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

storage = URLStorage(SessionLocal)


def get_storage() -> URLStorage:
    """
    FastAPI dependency: the process-wide alias store.
    Usage: storage: URLStorage = Depends(database.get_storage)
    """
    return storage


def init_db():
    """Create the storage directory and schema; safe to run against existing data."""
    storage_dir = os.path.dirname(settings.STORAGE_PATH)
    if storage_dir:
        os.makedirs(storage_dir, exist_ok=True)

    Base.metadata.create_all(bind=engine)
    logger.info("Database models initialized/checked.")


def verify_database_connection():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
