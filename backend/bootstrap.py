"""
Application bootstrap: logging, timezone and database connection.

`bootstrap(settings)` performs, in order:
1. Apply `LOG_LEVEL` to the root logger.
2. Resolve `APP_TIMEZONE` to a `ZoneInfo`.
3. Create the SQLAlchemy engine and verify it with one round trip.
4. Build a session factory bound to that engine.

The result is an `AppContext` that callers hand to whatever needs the
database or the configuration; nothing is stored in module globals.
Any failure surfaces as a `BootstrapError` subclass.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from backend.database.config.config import Settings
from backend.database.config.connection_engine import connect
from backend.database.config.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContext:
    """
    Explicit bundle of everything the bootstrap produced.

    Attributes
    ----------
    settings : Settings
        Validated configuration, including `BASE_URL` and `ADMIN_URL`.
    engine : Engine
        Verified, pooled connection engine.
    session_factory : sessionmaker
        Factory for ORM sessions bound to `engine`.
    timezone : ZoneInfo
        Application timezone.
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    timezone: ZoneInfo

    def now(self) -> datetime:
        """Current time as an aware datetime in the application timezone."""
        return datetime.now(self.timezone)

    def dispose(self) -> None:
        """Close all pooled connections."""
        self.engine.dispose()


def configure_logging(settings: Settings) -> None:
    """
    Apply `LOG_LEVEL` to the root logger.

    A stream handler with a timestamped format is installed only when the
    root logger has no handlers yet.

    Parameters
    ----------
    settings : Settings
        Application settings providing `LOG_LEVEL`.
    """
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(settings.LOG_LEVEL)


def resolve_timezone(settings: Settings) -> ZoneInfo:
    """
    Resolve `APP_TIMEZONE`.

    Raises
    ------
    ConfigurationError
        If the name is not a known IANA timezone.
    """
    try:
        return ZoneInfo(settings.APP_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(
            f"Unknown timezone {settings.APP_TIMEZONE!r}", fields=["APP_TIMEZONE"]
        ) from e


def bootstrap(settings: Settings) -> AppContext:
    """
    Run the full bootstrap for `settings`.

    Returns
    -------
    AppContext
        Ready-to-use context; call `dispose()` when done.

    Raises
    ------
    ConfigurationError
        Invalid timezone or unusable driver.
    DatabaseConnectionError
        The database could not be reached.
    """
    configure_logging(settings)
    timezone = resolve_timezone(settings)
    engine = connect(settings)
    session_factory = sessionmaker(bind=engine, autoflush=False)
    logger.debug("Bootstrap complete (timezone=%s, base_url=%s)", timezone.key, settings.BASE_URL)
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        timezone=timezone,
    )
