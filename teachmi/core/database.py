from sqlmodel import SQLModel, create_engine
from sqlalchemy.engine import Engine
from teachmi.core.config import settings
import logging

logger = logging.getLogger(__name__)


def normalize_database_url(db_url: str) -> str:
    """SQLAlchemy prefers postgresql:// over postgres://."""
    if db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql://", 1)
    return db_url


def build_engine(db_url: str) -> Engine:
    """Create an engine for the given URL with per-dialect options."""
    db_url = normalize_database_url(db_url)
    if db_url.startswith("sqlite"):
        # The engine is shared with the event loop's worker threads
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        db_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
    )


logger.info(f"Connecting to database: {settings.database_url[:20]}...")  # Log partial URL for debugging

engine = build_engine(settings.database_url)


def init_db(bind: Engine = None):
    """Initialize database tables."""
    # Import models so their tables are registered on the metadata
    from teachmi.models.storage_slot import StorageSlot  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
