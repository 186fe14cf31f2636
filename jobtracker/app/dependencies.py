from typing import Iterator

from sqlalchemy.orm import Session

from jobtracker.core import database


def get_db() -> Iterator[Session]:
    """Get a database session for the duration of one request."""
    if database.engine is None:
        database.init_database()

    db = database.SessionFactory()
    try:
        yield db
    finally:
        db.close()
