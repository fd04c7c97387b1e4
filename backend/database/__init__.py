"""
The `database` package is responsible for the application's database bootstrap.
It provides configuration, connection setup and transaction utilities that the
rest of the admin panel builds on.

Contents:
    - config:
        Typed settings, bootstrap errors and the SQLAlchemy connection engine.

    - helpers:
        Transaction helpers that open, commit, roll back and close sessions
        from an injected session factory.

    - core:
        Service-level operations (database health check).
"""
