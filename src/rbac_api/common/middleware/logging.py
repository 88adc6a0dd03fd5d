"""
Structured request logging middleware with correlation IDs.
"""
import time
from contextvars import ContextVar
from typing import Any, Callable, Dict, List, Optional

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from ..utils.uuid import generate_uuid_v7


# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
correlation_id_var: ContextVar[str] = ContextVar('correlation_id', default='')


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request/response logging with timing and correlation IDs.
    
    Adds ``X-Request-ID``, ``X-Correlation-ID`` and ``X-Process-Time`` to
    every response it handles.
    """
    
    def __init__(
        self,
        app,
        *,
        log_requests: bool = True,
        exclude_paths: Optional[List[str]] = None,
    ):
        super().__init__(app)
        self.log_requests = log_requests
        self.exclude_paths = exclude_paths or ["/health", "/docs", "/openapi.json"]
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request with structured logging."""
        start_time = time.time()
        
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)
        
        correlation_id = self._extract_or_generate_correlation_id(request)
        request_id = generate_uuid_v7()
        
        request_id_var.set(request_id)
        correlation_id_var.set(correlation_id)
        request.state.request_id = request_id
        request.state.correlation_id = correlation_id
        
        bound = logger.bind(request_id=request_id, correlation_id=correlation_id)
        
        if self.log_requests:
            bound.info(
                "Request received: {method} {path}",
                method=request.method,
                path=request.url.path,
                query=dict(request.query_params) if request.query_params else None,
                client_ip=self._get_client_ip(request),
            )
        
        try:
            response = await call_next(request)
        except Exception as exc:
            process_time = time.time() - start_time
            bound.opt(exception=exc).error(
                "Request error: {method} {path} ({error_type})",
                method=request.method,
                path=request.url.path,
                error_type=type(exc).__name__,
                process_time_ms=round(process_time * 1000, 2),
            )
            raise
        
        process_time = time.time() - start_time
        
        if self.log_requests:
            self._log_response(bound, request, response, process_time)
        
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Correlation-ID"] = correlation_id
        response.headers["X-Process-Time"] = str(process_time)
        
        return response
    
    def _extract_or_generate_correlation_id(self, request: Request) -> str:
        """Extract correlation ID from headers or generate new one."""
        return (
            request.headers.get("x-correlation-id") or
            request.headers.get("x-request-id") or
            generate_uuid_v7()
        )
    
    def _log_response(self, bound, request: Request, response: Response, process_time: float) -> None:
        """Log completion; level follows the status code."""
        if response.status_code >= 500:
            log_level = "error"
        elif response.status_code >= 400 or process_time > 1.0:
            log_level = "warning"
        else:
            log_level = "info"
        
        getattr(bound, log_level)(
            "Request completed: {method} {path} -> {status_code} in {process_time_ms}ms",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2),
        )
    
    def _get_client_ip(self, request: Request) -> str:
        """Get client IP address handling proxies."""
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        
        if request.client is not None:
            return request.client.host
        
        return "unknown"


def get_request_context() -> Dict[str, Any]:
    """Get current request context from context variables."""
    return {
        "request_id": request_id_var.get(''),
        "correlation_id": correlation_id_var.get(''),
    }
