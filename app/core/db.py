"""Engine and session factory for the optional backing database."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.logging import get_logger
from app.models.base import Base

log = get_logger("db")


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        # In-memory SQLite must share one connection across threads
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, pool_pre_ping=True)


def build_session_factory(database_url: Optional[str]) -> Optional[sessionmaker[Session]]:
    """Return a session factory, or None when running in demo mode."""
    if not database_url:
        return None

    engine = build_engine(database_url)
    Base.metadata.create_all(engine)
    log.info(f"Database ready ({engine.dialect.name})")
    return sessionmaker(bind=engine, expire_on_commit=False)
