"""
The `config` package provides the building blocks for establishing and managing the database connection.

Contents:
    - config: Configuration layer - strongly typed settings loaded from environment variables (with .env support), including the base and admin URLs
    - errors: Typed bootstrap errors (`ConfigurationError`, `DatabaseConnectionError`)
    - connection_engine: Database layer - SQLAlchemy bootstrap that constructs a connection URL from those settings, creates the Engine and verifies it can connect

Settings and engines are returned to the caller and passed on explicitly; nothing here is a module-level global.
"""
