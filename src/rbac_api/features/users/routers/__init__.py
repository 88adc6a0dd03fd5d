"""User routers."""

from .users import router

__all__ = ["router"]
