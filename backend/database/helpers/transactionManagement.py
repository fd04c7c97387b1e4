"""
Database Transaction Management
===============================

This module provides utilities for managing SQLAlchemy database sessions
using Python context variables and a decorator-based transaction wrapper.

It allows a database session to propagate across nested calls without
threading it through every argument list. The session factory itself is
injected by the caller (usually `AppContext.session_factory`), so no
engine is bound at import time.

Key features
~~~~~~~~~~~~
- Context variable to store the active session
- Implicit reuse of an existing session
- Automatic commit and rollback handling
- Clean session closure after execution

"""

from functools import wraps
import contextvars

# --------------------------------------------------------------------
# Context variable to store the current database session.
# --------------------------------------------------------------------
db_session_context = contextvars.ContextVar("db_session_context", default=None)
"""Context variable storing the active SQLAlchemy session."""


def transactional(func):
    """
    Decorator to wrap functions in a managed SQLAlchemy transaction.

    Ensures that:
    - If a session already exists in context, it is reused.
    - Otherwise, a new session is opened from the `session_factory`
      keyword argument, committed, and closed.
    - On errors, the session is rolled back and closed.

    Parameters
    ----------
    func : callable
        The function to wrap. It must accept a `session` keyword argument.

    Returns
    -------
    callable
        The wrapped function. Callers pass `session_factory=...` unless a
        session is already active.

    Example
    -------
    >>> @transactional
    ... def count_rows(session=None):
    ...     return session.execute(text("SELECT COUNT(*) FROM product")).scalar()
    ...
    >>> count_rows(session_factory=context.session_factory)
    """
    @wraps(func)
    def wrap_func(*args, session_factory=None, **kwargs):
        session = db_session_context.get()
        if session is not None:
            return func(*args, session=session, **kwargs)

        if session_factory is None:
            raise TypeError(
                f"{func.__name__}() needs a session_factory when no session is active"
            )

        session = session_factory()
        token = db_session_context.set(session)

        try:
            result = func(*args, session=session, **kwargs)
            session.flush()
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
            db_session_context.reset(token)

        return result

    return wrap_func
