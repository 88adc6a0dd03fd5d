"""HTTP middleware."""

from .logging import StructuredLoggingMiddleware, get_request_context

__all__ = ["StructuredLoggingMiddleware", "get_request_context"]
