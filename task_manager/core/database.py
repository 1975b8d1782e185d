import logging
import time
from typing import Generator
from sqlalchemy import create_engine, event, text, Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool

from .config import get_settings
from .exceptions import TaskManagerError

logger = logging.getLogger(__name__)

settings = get_settings()


def create_db_engine(database_url: str) -> Engine:
    """
    Create SQLAlchemy engine for the given URL

    SQLite gets thread-shareable connections and enforced foreign keys,
    everything else a pre-pinged connection pool.
    """
    is_sqlite = database_url.startswith("sqlite")

    if is_sqlite:
        options = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
    else:
        options = {
            "poolclass": QueuePool,
            "pool_size": 10,
            "max_overflow": 20,
            "pool_pre_ping": True,
            "pool_recycle": 300,
        }

    db_engine = create_engine(database_url, echo=settings.debug, **options)

    @event.listens_for(db_engine, "connect")
    def receive_connect(dbapi_connection, connection_record):
        """Event listener for database connections"""
        if is_sqlite:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
        logger.info("Database connection established")

    @event.listens_for(db_engine, "checkout")
    def receive_checkout(dbapi_connection, connection_record, connection_proxy):
        """Event listener for connection checkout"""
        logger.debug("Database connection checked out from pool")

    return db_engine


engine = create_db_engine(settings.database_url)

# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base class for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Database dependency for FastAPI

    Yields:
        Session: Database session
    """
    db = SessionLocal()
    try:
        yield db
    except TaskManagerError:
        db.rollback()
        raise
    except Exception as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def init_db(max_retries: int = None, delay: int = None) -> bool:
    """
    Create database tables, retrying while the database is unreachable

    Returns:
        bool: True if successful, False otherwise
    """
    # Import all models here to ensure they are registered
    from .. import models  # noqa: F401

    max_retries = max_retries or settings.db_connect_retries
    delay = settings.db_connect_delay if delay is None else delay

    for attempt in range(max_retries):
        try:
            logger.info(f"Attempting to connect to database (attempt {attempt + 1}/{max_retries})")
            Base.metadata.create_all(bind=engine)
            logger.info("Database tables created successfully")
            return True
        except OperationalError as e:
            logger.warning(f"Database connection failed (attempt {attempt + 1}): {e}")
            if attempt < max_retries - 1:
                logger.info(f"Retrying in {delay} seconds...")
                time.sleep(delay)
    logger.error("Failed to connect to database after all retries")
    return False


def check_db_connection() -> bool:
    """
    Check database connectivity

    Returns:
        bool: True if connected, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.debug("Database connection check successful")
        return True
    except OperationalError as e:
        logger.error(f"Database connection check failed: {e}")
        return False
