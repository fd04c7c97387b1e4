"""
Pydantic models used for response validation and API data contracts.
"""

from typing import Optional

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """
    Result of a database health check.
    """
    status: str = Field(..., description="`ok` when the database answered, `unavailable` otherwise.", examples=["ok"])
    database: Optional[str] = Field(None, description="SQLAlchemy dialect name of the connected database.", examples=["mysql"])
    detail: Optional[str] = Field(None, description="Error description when the database is unavailable.")


class SiteUrls(BaseModel):
    """
    Base URLs used across the admin panel for link generation.
    """
    base_url: str
    """Public base URL of the shop (always ends with `/`)."""
    admin_url: str
    """Base URL of the admin panel, `base_url` + admin path + `/`."""
