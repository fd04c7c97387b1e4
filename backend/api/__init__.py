"""
API Package: FastAPI Router • Models • URL Utils
=================================================

Contents
--------
- fast_api
    FastAPI router with endpoints for:
      • /health: database round trip, 503 when the database is unavailable
      • /urls: configured base URL and admin URL

- models
    Pydantic data contracts for responses:
      • HealthStatus, SiteUrls

- utils
    Link helpers:
      • site_url(settings, path): URL below BASE_URL
      • admin_url(settings, path): URL below ADMIN_URL
"""
