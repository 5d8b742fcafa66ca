"""API routers."""

from . import holidays, status, stores

__all__ = ["holidays", "status", "stores"]
