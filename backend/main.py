"""
FastAPI application bootstrap with: \n
- Lifespan-managed bootstrap (logging, timezone, verified database connection) \n
- API routes for health and site URLs \n

Run with ``uvicorn backend.main:create_app --factory``.

Environment contract (from `Settings`): \n
- DB_*: database connection parameters. \n
- BASE_URL / ADMIN_PATH: site and admin URLs. \n
- APP_TIMEZONE / LOG_LEVEL: timezone and log verbosity. \n
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from backend.api.fast_api import router
from backend.bootstrap import bootstrap
from backend.database.config.config import Settings, get_settings
from backend.database.config.errors import BootstrapError

logger = logging.getLogger("uvicorn")
"""Logger instance for capturing and emitting Uvicorn server logs."""


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters
    ----------
    settings : Settings, optional
        Explicit settings; `get_settings()` is used when omitted.

    Notes
    -----
    - On startup the lifespan runs `bootstrap` and stores the resulting
      `AppContext` on `app.state.context`. A `BootstrapError` aborts startup.
    - On shutdown the connection pool is disposed.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            context = bootstrap(settings if settings is not None else get_settings())
        except BootstrapError as e:
            logger.error("Bootstrap failed: %s", e)
            raise
        app.state.context = context
        logger.info("Database connection ready.")
        try:
            yield
        finally:
            context.dispose()
            logger.info("Database connection pool disposed.")

    app = FastAPI(lifespan=lifespan)
    app.include_router(router)
    return app
