from typing import Generator
from sqlalchemy.orm import sessionmaker

from kidpoints.database.session import SQLALCHEMY_DATABASE_URL, get_engine


ENGINE = get_engine(
    SQLALCHEMY_DATABASE_URL,
    pool_recycle=1800,    # recycle connections periodically (helps stale conns)
    pool_pre_ping=True,   # validates connections before using
    future=True,
)
SessionLocal = sessionmaker(
    bind=ENGINE,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    future=True,
)


def get_db() -> Generator:  # pragma: no cover
    """
    Returns a generator that yields a database session

    Yields:
        Session: A database session object.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
