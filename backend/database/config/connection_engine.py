"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the admin backend:
- Builds a SQLAlchemy connection URL from environment-backed settings.
- Creates the Engine (connection pool + SQL execution entry point).
- Verifies the engine can actually connect before anyone depends on it.

Notes
-----
- Uses `URL.create(...)` so credentials are escaped and never hardcoded.
- Pool sizing and connect timeouts only apply to network drivers; sqlite
  files get the driver defaults.
- Failures are raised as `ConfigurationError` / `DatabaseConnectionError`.
  Rendered URLs always hide the password.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import ArgumentError, NoSuchModuleError, SQLAlchemyError

from backend.database.config.config import Settings
from backend.database.config.errors import ConfigurationError, DatabaseConnectionError

logger = logging.getLogger(__name__)


def build_connection_url(settings: Settings) -> URL:
    """
    Construct the SQLAlchemy connection URL from `settings`.

    Empty host, username or password values are left out of the URL so that
    file based drivers such as sqlite can reuse the same settings.
    """
    return URL.create(
        drivername=settings.DB_DRIVER_NAME,   # e.g., "mysql+pymysql", "sqlite"
        username=settings.DB_USERNAME or None,
        password=settings.DB_PASSWORD or None,
        host=settings.DB_HOST or None,
        port=settings.DB_PORT,
        database=settings.DB_DATABASE_NAME,
    )


def _engine_options(url: URL, settings: Settings) -> dict:
    options = {
        "pool_pre_ping": True,
        "pool_recycle": settings.DB_POOL_RECYCLE,
    }
    if url.get_backend_name() != "sqlite":
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_MAX_OVERFLOW
        options["connect_args"] = {"connect_timeout": settings.DB_CONNECT_TIMEOUT}
    return options


def create_connection_engine(settings: Settings) -> Engine:
    """
    Create the Engine for `settings` without connecting.

    Raises
    ------
    ConfigurationError
        If the driver name is unknown or its DBAPI module is not installed.
    """
    url = build_connection_url(settings)
    try:
        return create_engine(url, **_engine_options(url, settings))
    except (NoSuchModuleError, ArgumentError, ImportError) as e:
        raise ConfigurationError(
            f"Cannot load database driver {settings.DB_DRIVER_NAME!r}: {e}",
            fields=["DB_DRIVER_NAME"],
        ) from e


def verify_connection(engine: Engine) -> None:
    """
    Open one connection and run `SELECT 1`.

    Raises
    ------
    DatabaseConnectionError
        If the database is unreachable, rejects the connection or the
        pool gives up waiting for one.
    """
    safe_url = engine.url.render_as_string(hide_password=True)
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        reason = getattr(e, "orig", None) or e
        logger.error("Connection error for %s: %s", safe_url, reason)
        raise DatabaseConnectionError(
            f"Connection error: {reason}", url=safe_url
        ) from e
    logger.info("Connected to %s", safe_url)


def connect(settings: Settings) -> Engine:
    """
    Create the Engine and verify it, disposing it again if verification fails.

    Returns
    -------
    Engine
        A pooled engine that has completed at least one round trip.
    """
    engine = create_connection_engine(settings)
    try:
        verify_connection(engine)
    except Exception:
        engine.dispose()
        raise
    return engine
