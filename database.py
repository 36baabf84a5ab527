from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from functools import wraps
from contextlib import contextmanager
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_report_engine(database_url: str) -> Engine:
    """
    Build the engine used to stage one report run

    An in-memory SQLite database lives inside a single connection, so
    StaticPool is required to let every session see the same tables.
    """
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, pool_pre_ping=True)

    # models registers the staging tables on Base
    import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    return engine


@contextmanager
def get_db(engine: Engine):
    """
    Provide a Session bound to the given engine

    The session is always closed when the block exits.
    """
    db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield db
    finally:
        db.close()


def transactional(func):
    """
    Transaction decorator: commit on success, roll back on failure

    Usage:
        @transactional
        def load_something(db: Session, ...):
            db.add(record)
            # no manual commit, the decorator handles it

    If the function raises:
        - the session is rolled back
        - the exception is re-raised for the caller

    Notes:
        - the first argument must be db: Session (or pass db= as keyword)
        - do not commit inside the function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        db = None
        if args and isinstance(args[0], Session):
            db = args[0]
        elif 'db' in kwargs:
            db = kwargs['db']

        if db is None:
            raise ValueError(
                f"@transactional requires 'db: Session' as first argument, "
                f"but got args={args}, kwargs={kwargs}"
            )

        try:
            result = func(*args, **kwargs)
            db.commit()
            return result
        except Exception as e:
            logger.error(f"Transaction failed in {func.__name__}: {e}", exc_info=True)
            db.rollback()
            raise

    return wrapper
