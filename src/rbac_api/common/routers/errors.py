"""
Translation of typed errors into error envelopes at the endpoint boundary.
"""
from functools import wraps
from typing import Callable

from fastapi.responses import JSONResponse
from loguru import logger

from ..exceptions import ErrorKind, RbacApiError
from ..middleware.logging import get_request_context
from ..models.envelope import error_json_response, error_response


def translate_errors(failure_message: str) -> Callable:
    """
    Decorator mapping errors raised by an endpoint to error envelopes.
    
    Typed errors keep their message and get the status of their kind. Store
    failures and untyped exceptions become a 500 envelope whose message is
    ``failure_message`` and whose details carry the underlying error text.
    
    Usage:
        @router.get("/{role_id}")
        @translate_errors("Failed to retrieve role")
        async def get_role(...):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except RbacApiError as e:
                if e.kind is not ErrorKind.UNKNOWN:
                    return error_json_response(e)
                logger.bind(**get_request_context()).error(f"{failure_message}: {e.message} ({e.details})")
                return JSONResponse(
                    status_code=e.status_code,
                    content=error_response(failure_message, e.details or e.message)
                )
            except Exception as e:
                logger.bind(**get_request_context()).opt(exception=e).error(f"{failure_message}: {e}")
                return JSONResponse(
                    status_code=500,
                    content=error_response(failure_message, str(e) or type(e).__name__)
                )
        
        return wrapper
    
    return decorator
