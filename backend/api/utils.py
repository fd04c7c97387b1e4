"""
Link helpers built on the configured base URLs.

Functions
---------
site_url(settings, path="") -> str
    Absolute URL of `path` below `BASE_URL`.
admin_url(settings, path="") -> str
    Absolute URL of `path` below `ADMIN_URL`.
"""

from backend.database.config.config import Settings


def _join(base: str, path: str) -> str:
    return base + path.lstrip("/")


def site_url(settings: Settings, path: str = "") -> str:
    """
    Build a public shop URL.

    Parameters
    ----------
    settings : Settings
        Application settings providing `BASE_URL`.
    path : str
        Relative path, e.g. ``"product.php?id=3"``. A leading `/` is ignored.

    Returns
    -------
    str
        ``BASE_URL + path``.
    """
    return _join(settings.BASE_URL, path)


def admin_url(settings: Settings, path: str = "") -> str:
    """Build an admin panel URL: ``ADMIN_URL + path``."""
    return _join(settings.ADMIN_URL, path)
