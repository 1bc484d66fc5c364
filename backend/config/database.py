from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import SQLAlchemyError
from fastapi import Request
import logging
import os

logger = logging.getLogger("app.config.db")

# Get environment variables
DB_USER = os.getenv("DB_USER", "edutech")
DB_PASSWORD = os.getenv("DB_PASSWORD", "edutech")
DB_NAME = os.getenv("DB_NAME", "edutech-db")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")

# Connection URL
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+psycopg2://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Store handle owned by the application lifespan."""

    def __init__(self, url: str = None):
        self.url = url or DATABASE_URL
        self.engine = None
        self._session_factory = None

    def open(self):
        if self.engine is not None:
            return self

        logger.info("Creating database engine...")
        kwargs = {}
        is_sqlite = self.url.startswith("sqlite")
        if is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.url or self.url in ("sqlite://", "sqlite+pysqlite://"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs["pool_pre_ping"] = True

        self.engine = create_engine(self.url, **kwargs)
        if is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = sessionmaker(autocommit = False, autoflush = False, bind = self.engine)

        # Register models on Base before creating tables
        from models import user_model, course_model, enrollment_model  # noqa: F401
        Base.metadata.create_all(bind = self.engine)
        logger.info("Database engine and session configured successfully")
        return self

    def close(self):
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    def session(self):
        if self._session_factory is None:
            raise RuntimeError("Database is not open")
        return self._session_factory()


# Dependency for use FastAPI
def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error("Database session error: %s", e)
        raise
    finally:
        db.close()
        logger.debug("Database session closed")
