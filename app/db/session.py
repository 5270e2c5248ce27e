# File: app/db/session.py

from collections.abc import Callable, Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.sqlalchemy_database_url


def build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # An in-memory database only lives as long as its single connection.
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


def make_session_dependency(
    session_factory: sessionmaker,
) -> Callable[[], Generator[Session, None, None]]:
    def get_db() -> Generator[Session, None, None]:
        """
        One session per request.

        Anything that escapes the request rolls back the open transaction
        before the session is closed.
        """
        db: Session = session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    return get_db


engine = build_engine(SQLALCHEMY_DATABASE_URL)

SessionLocal = make_session_factory(engine)

get_db = make_session_dependency(SessionLocal)
