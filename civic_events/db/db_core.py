"""Core database functionality and configuration.

This module provides database management with environment-dependent
configuration, connection pooling, and session handling.
"""

from contextlib import contextmanager
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Generator
import os

from sqlalchemy import create_engine, Engine, inspect
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import scoped_session, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..models import Base
from ..models.event_row import EventRow  # noqa
from ..config.environment import IS_PRODUCTION_ENVIRONMENT

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_PATH = Path(__file__).parent.parent.parent / 'data' / 'events.db'

class DatabaseConfig:
    """Database configuration settings."""

    def __init__(
        self,
        sqlite_path: Optional[Path] = None,
        postgres_url: Optional[str] = None,
        echo: bool = False,
        pool_size: int = 3,
        max_overflow: int = 4,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        pool_pre_ping: bool = True,
        production: Optional[bool] = None
    ):
        """
        Initialize database configuration.

        In production environment, DATABASE_URL must be set in environment variables
        or provided explicitly via postgres_url parameter.

        Args:
            sqlite_path: Path to SQLite database file (for development)
            postgres_url: PostgreSQL connection URL (for production)
                        If not provided, will use DATABASE_URL env variable
            echo: Whether to echo SQL statements
            pool_size: Size of the connection pool (permanent connections)
            max_overflow: Maximum number of extra connections to allow temporarily
            pool_timeout: Seconds to wait for an available connection
            pool_recycle: Seconds before connections are recycled
            pool_pre_ping: Whether to ping connections before using them
            production: Override for the ENVIRONMENT setting

        Raises:
            ValueError: If in production environment and no database URL is provided
                      either via postgres_url parameter or DATABASE_URL env variable
        """
        self.production = IS_PRODUCTION_ENVIRONMENT if production is None else production

        if self.production:
            self.postgres_url = postgres_url or os.environ.get('DATABASE_URL')
            if not self.postgres_url:
                raise ValueError(
                    "Database URL must be provided either via postgres_url parameter "
                    "or DATABASE_URL environment variable when in production environment"
                )
            self.sqlite_path = None
        else:
            self.postgres_url = None
            self.sqlite_path = Path(sqlite_path) if sqlite_path else DEFAULT_SQLITE_PATH

        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.pool_pre_ping = pool_pre_ping

    @property
    def connection_url(self) -> str:
        """Get the database connection URL based on environment."""
        if not self.production:
            if not self.sqlite_path:
                raise ValueError("SQLite path not configured")
            return f"sqlite:///{self.sqlite_path}"
        if not self.postgres_url:
            raise ValueError("PostgreSQL URL not configured")
        return self.postgres_url

    def get_engine_args(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine arguments based on configuration."""
        args: Dict[str, Any] = {"echo": self.echo}

        if not self.production:
            args["connect_args"] = {"check_same_thread": False}
            args["poolclass"] = StaticPool
        else:
            args.update({
                "pool_size": self.pool_size,
                "max_overflow": self.max_overflow,
                "pool_timeout": self.pool_timeout,
                "pool_recycle": self.pool_recycle,
                "pool_pre_ping": self.pool_pre_ping
            })

        return args

class DatabaseError(Exception):
    """Base exception for database-related errors."""
    pass

class ConnectionError(DatabaseError):
    """Raised when there are issues connecting to the database."""
    pass

class SessionError(DatabaseError):
    """Raised when there are issues with database sessions."""
    pass

class Database:
    """Owns the engine and session factory for one database."""

    def __init__(self, config: Optional[DatabaseConfig] = None):
        self.config = config or DatabaseConfig()
        self.engine: Optional[Engine] = None
        self._session_factory = sessionmaker(expire_on_commit=False)
        self._scoped_session = scoped_session(self._session_factory)
        self._tables_checked = False

        self._setup_engine()

    def _setup_engine(self) -> None:
        """Set up the SQLAlchemy engine."""
        try:
            self.engine = create_engine(
                self.config.connection_url,
                **self.config.get_engine_args()
            )
            self._session_factory.configure(bind=self.engine)
        except Exception as e:
            raise ConnectionError(f"Failed to create database engine: {e}") from e

    def _ensure_sqlite_directory(self) -> None:
        # Created on first use rather than at import
        if self.config.sqlite_path:
            self.config.sqlite_path.parent.mkdir(parents=True, exist_ok=True)

    def init_db(self) -> None:
        """Initialize the database schema."""
        if not self.engine:
            raise ConnectionError("Database engine not initialized")

        try:
            self._ensure_sqlite_directory()
            with self.engine.begin() as conn:
                Base.metadata.create_all(conn)
            self._tables_checked = True
            logger.info("Database schema initialized successfully")
        except Exception as e:
            raise DatabaseError(f"Failed to initialize database schema: {e}") from e

    def ensure_tables_exist(self) -> None:
        """Ensure all required database tables exist."""
        if self._tables_checked:
            return
        if not self.engine:
            raise ConnectionError("Database engine not initialized")

        try:
            self._ensure_sqlite_directory()
            inspector = inspect(self.engine)
            existing_tables = inspector.get_table_names()
            required_tables = set(Base.metadata.tables)

            if not required_tables.issubset(existing_tables):
                logger.info("Some tables missing, initializing database schema")
                with self.engine.begin() as conn:
                    Base.metadata.create_all(conn)
                logger.info("Database schema initialized successfully")

            self._tables_checked = True
        except Exception as e:
            raise DatabaseError(f"Failed to verify/create database schema: {e}") from e

    def dispose(self) -> None:
        """Release pooled connections."""
        self._scoped_session.remove()
        if self.engine:
            self.engine.dispose()

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Provide a transactional scope around a series of operations.

        Commits when the block finishes, rolls back and raises SessionError
        if anything inside it raises.

        Example:
            with db.session() as session:
                row = session.get(EventRow, event_id)
                row.attendee_count += 1
        """
        self.ensure_tables_exist()

        session = self._scoped_session()
        try:
            yield session
            session.commit()
        except OperationalError:
            # Left unwrapped so with_retry can recognise transient failures
            session.rollback()
            raise
        except Exception as e:
            session.rollback()
            raise SessionError(f"Database session error: {e}") from e
        finally:
            session.close()
            self._scoped_session.remove()

# Global database instance with configuration taken from the environment
db = Database()
