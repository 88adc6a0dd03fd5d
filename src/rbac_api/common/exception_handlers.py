"""
Application exception handlers.

Everything that escapes an endpoint still leaves as an error envelope.
"""
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import RbacApiError
from .models.envelope import error_json_response, error_response


def format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """Flatten pydantic errors into ``loc: msg; loc: msg``."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}" if location else error.get("msg", "invalid"))
    return "; ".join(parts)


class ExceptionHandlerRegistry:
    """Registers envelope-producing exception handlers on an application."""
    
    def __init__(self, is_production: bool = True):
        self.is_production = is_production
    
    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application."""
        
        @app.exception_handler(RbacApiError)
        async def rbac_api_error_handler(request: Request, exc: RbacApiError):
            """Handle typed application errors."""
            if exc.status_code >= 500:
                logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})")
            return error_json_response(exc)
        
        @app.exception_handler(RequestValidationError)
        async def request_validation_error_handler(request: Request, exc: RequestValidationError):
            """Handle malformed request bodies and parameters."""
            details = format_validation_errors(exc.errors())
            logger.debug(f"Invalid request to {request.url.path}: {details}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=error_response("Invalid request", details)
            )
        
        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(request: Request, exc: StarletteHTTPException):
            """Handle routing errors (unknown path, wrong method)."""
            return JSONResponse(
                status_code=exc.status_code,
                content=error_response(str(exc.detail)),
                headers=getattr(exc, "headers", None)
            )
        
        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.opt(exception=exc).error(f"Unhandled exception: {exc}")
            
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_response(
                    "An unexpected error occurred",
                    None if self.is_production else str(exc)
                )
            )


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """
    Register exception handlers for the application.
    
    Args:
        app: FastAPI application instance
        is_production: Hide exception text from 500 envelopes when True
    """
    ExceptionHandlerRegistry(is_production).register_handlers(app)
