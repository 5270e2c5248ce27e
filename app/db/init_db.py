"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.db.session import engine as default_engine
from app.models.base import Base
from app.models import product, user  # noqa: F401

logger = logging.getLogger(__name__)


def check_connection(engine: Engine = default_engine) -> None:
    """
    Open a connection and run a trivial query.

    Raises ``sqlalchemy.exc.OperationalError`` when the server is unreachable.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Database connected!")


def init_db(engine: Engine = default_engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)


def drop_db(engine: Engine = default_engine) -> None:
    Base.metadata.drop_all(bind=engine)
