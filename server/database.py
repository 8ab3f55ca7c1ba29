# server/database.py

from contextlib import contextmanager
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.errors import StorageUnavailable
from core.logger import get_logger
from models import Base


log = get_logger("database")


def create_db_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url == "sqlite://":
            options["poolclass"] = StaticPool
        return create_engine(database_url, **options)

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        pool_recycle=3600,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )


def init_db(engine: Engine):
    Base.metadata.create_all(bind=engine)


def get_db(request: Request):
    """
    FastAPI dependency yielding one session per request from the
    session factory held by the application context.
    """
    db = request.app.state.context.session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def storage_errors():
    """
    Translates connection-level database failures into StorageUnavailable.
    Constraint violations pass through untouched for the caller to map.
    """
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        log.error("Storage backend failure: %s", exc.orig)
        raise StorageUnavailable() from exc
