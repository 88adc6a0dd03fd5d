"""Router helpers shared by the feature routers."""

from .base import SlashTolerantRouter
from .errors import translate_errors
from .urls import current_url, child_url

__all__ = ["SlashTolerantRouter", "translate_errors", "current_url", "child_url"]
