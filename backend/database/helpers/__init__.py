"""
The `helpers` package provides utility functions and decorators
that support database operations.

Contents
--------
- transactionManagement
    Provides tools for database transaction management:
        - Context variable (`db_session_context`) for propagating the active session across function calls without explicit passing
        - `@transactional` decorator for wrapping functions in a managed transaction:
            - Reuses an existing session if one is active in context
            - Otherwise opens one from the injected `session_factory`, commits and closes it
            - Rolls back the session on errors
"""
