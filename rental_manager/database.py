from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from rental_manager.config import settings
from rental_manager.models.base import Base

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    # SQLite-specific settings
    connect_args={"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {},
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create the key-value table if it does not exist yet."""
    # Registers KeyValueEntry on Base.metadata
    import rental_manager.models.kv_entry  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db() -> Iterator[Session]:
    """
    Yield a database session and ensure it's closed after use.

    Usage:
        with contextlib.contextmanager(get_db)() as db:
            store = DirectoryStore(KeyValueStore(db))
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
