"""Database configuration and session management.

The record store location comes from the environment:

* ``DATABASE_URL`` - SQLAlchemy URL of the store (required)
* ``DATABASE_PASSWORD`` - credential, required unless the URL already
  carries one or the backend is SQLite

The engine is created by :func:`init_database` at API startup so that a
missing setting aborts the process before any request is served.
"""
import os
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, URL, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from jobtracker.core.exceptions import ConfigurationError
from jobtracker.core.logging import setup_logging

logger = setup_logging('core_database')

# Initialize base class for declarative models
Base = declarative_base()

engine: Optional[Engine] = None
SessionFactory = sessionmaker(autocommit=False, autoflush=False)


def get_database_url() -> URL:
    """Build the store URL from the environment.

    Raises:
        ConfigurationError: If the URL or the credential is missing
    """
    raw_url = os.getenv("DATABASE_URL")
    if not raw_url:
        raise ConfigurationError(
            "Missing required environment variables",
            "DATABASE_URL must be set"
        )

    try:
        url = make_url(raw_url)
    except ArgumentError as e:
        raise ConfigurationError("Invalid DATABASE_URL", str(e)) from e

    password = os.getenv("DATABASE_PASSWORD")
    if password:
        url = url.set(password=password)

    if url.get_backend_name() != "sqlite" and not url.password:
        raise ConfigurationError(
            "Missing required environment variables",
            "DATABASE_PASSWORD must be set when DATABASE_URL has no credential"
        )
    return url


def get_engine() -> Engine:
    """Create the SQLAlchemy engine for the configured store."""
    url = get_database_url()
    connect_args = {"check_same_thread": False} if url.get_backend_name() == "sqlite" else {}
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


def init_database() -> Engine:
    """Create the engine, bind the session factory and create missing tables."""
    global engine

    # Register models on Base.metadata
    from jobtracker.core import models  # noqa: F401

    engine = get_engine()
    SessionFactory.configure(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database initialized for {engine.url.render_as_string(hide_password=True)}")
    return engine


@contextmanager
def get_session() -> Iterator[Session]:
    """Get a managed database session that commits on success."""
    if engine is None:
        init_database()

    session = SessionFactory()
    try:
        yield session
        session.commit()
    except Exception as e:
        session.rollback()
        logger.error(f"Error in database session: {str(e)}")
        raise
    finally:
        session.close()
