"""
FastAPI Router: Health • Site URLs
===================================

Purpose
-------
Defines the HTTP API of the admin backend bootstrap:
- `GET /health`: round trip against the database
- `GET /urls`: the configured base and admin URLs

Key Notes
---------
- The `AppContext` built during application startup is read from
  `request.app.state.context`; routes never reach for globals.
- Any SQLAlchemy error during a health check (unreachable database,
  exhausted pool) is reported as HTTP 503.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from backend.api.models import HealthStatus, SiteUrls
from backend.api.utils import admin_url, site_url
from backend.bootstrap import AppContext
from backend.database.core.funcs import check_database_health

logger = logging.getLogger(__name__)

router = APIRouter()
"""Creates the FastAPI router in which we define its routes"""


def get_context(request: Request) -> AppContext:
    """Dependency returning the `AppContext` attached at startup."""
    return request.app.state.context


@router.get('/health', response_model=HealthStatus, response_model_exclude_none=True)
def health(context: AppContext = Depends(get_context)):
    """Check that the database still answers.

    Response:
        200: {'status': 'ok', 'database': <dialect>}
        503: {'status': 'unavailable', 'detail': <error>}
    """
    try:
        res = check_database_health(session_factory=context.session_factory)
    except SQLAlchemyError as e:
        reason = getattr(e, "orig", None) or e
        logger.warning("Health check failed: %s", reason)
        body = HealthStatus(status="unavailable", detail=str(reason))
        return JSONResponse(status_code=503, content=body.model_dump(exclude_none=True))
    return HealthStatus(status="ok", database=res["dialect"])


@router.get('/urls', response_model=SiteUrls)
def urls(context: AppContext = Depends(get_context)):
    """Return the base URL and the derived admin URL."""
    return SiteUrls(
        base_url=site_url(context.settings),
        admin_url=admin_url(context.settings),
    )
