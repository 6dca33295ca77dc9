"""Engine, session factory and the per-request session dependency."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.db.models import Base

logger = logging.getLogger(__name__)

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str) -> Engine:
    kwargs: dict = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # One shared connection, otherwise every checkout sees an empty database
        if url in _IN_MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db() -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
