from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from siteindexer import config
from siteindexer.db.models import Base

# Simple cache to avoid creating multiple Engine objects in the same process.
_ENGINE: Optional[Engine] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(database_url: Optional[str] = None) -> Engine:
    """Create or return a cached SQLAlchemy Engine for `database_url`.

    Caches a single Engine instance per process to avoid the cost of
    creating many engines when repository instances are created.
    """
    global _ENGINE
    database_url = database_url or config.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not set")
    if _ENGINE is None:
        _ENGINE = create_engine(database_url, future=True)
        if _ENGINE.dialect.name == "sqlite":
            event.listen(_ENGINE, "connect", _enable_sqlite_foreign_keys)
    return _ENGINE


def init_db(engine: Engine) -> None:
    """Create the `sites` and `pages` tables if they do not exist."""
    Base.metadata.create_all(engine)
