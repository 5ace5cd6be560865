# rotorwash/db/init_db.py
"""Database initialization utilities."""
import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from rotorwash.models import Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create the option table if it does not exist yet.

    Note: This is suitable for development/testing only.
    """
    try:
        existing_tables = inspect(engine).get_table_names()
        Base.metadata.create_all(bind=engine)
        created = sorted(set(Base.metadata.tables) - set(existing_tables))
        if created:
            logger.info(f"Database tables created: {', '.join(created)}")
        else:
            logger.info(f"Database already initialized with {len(existing_tables)} tables")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise


def drop_db(engine: Engine) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Only for development/testing purposes.
    """
    try:
        Base.metadata.drop_all(bind=engine)
        logger.warning("All database tables dropped")
    except Exception as e:
        logger.error(f"Error dropping database: {e}")
        raise
