from sqlalchemy.orm import Session

from rental_manager.database import SessionLocal, init_db
from rental_manager.directory import DirectoryStore
from rental_manager.logging_config import configure_logging


def create_directory(db: Session | None = None) -> DirectoryStore:
    """
    Process start-up: configure logging, open the store and seed it.

    Args:
        db: Session to use; a new one on the configured database if omitted.
            The caller owns closing it.

    Returns:
        DirectoryStore with demo users and the room catalog in place
    """
    configure_logging()
    if db is None:
        init_db()
        db = SessionLocal()
    store = DirectoryStore.from_db(db)
    store.initialize()
    return store
