"""
Service-layer database operations.

Functions are wrapped with the `@transactional` decorator, which manages
SQLAlchemy sessions and transactions. Callers pass `session_factory=...`
(normally `AppContext.session_factory`) and the decorator injects the
`session`.
"""

from sqlalchemy import text
from sqlalchemy.orm import Session

from backend.database.helpers.transactionManagement import transactional


@transactional
def check_database_health(session: Session) -> dict:
    """
    Run a trivial round trip against the database.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    dict
        `{"connected": True, "dialect": <dialect name>}`.

    Raises
    ------
    sqlalchemy.exc.SQLAlchemyError
        If the database cannot be reached; the caller decides how to report it.
    """
    session.execute(text("SELECT 1"))
    return {"connected": True, "dialect": session.get_bind().dialect.name}
