"""
Custom APIRouter that handles both trailing and non-trailing slash endpoints.

Every route is registered twice (with and without a trailing slash) so clients
never get a 307 redirect for the "other" spelling.
"""
from typing import Any, Callable

from fastapi import APIRouter as FastAPIRouter
from fastapi.types import DecoratedCallable
from loguru import logger


class SlashTolerantRouter(FastAPIRouter):
    """
    APIRouter that also answers the alternate trailing-slash spelling of each path.
    
    Example:
        ``@router.get("/{role_id}")`` also handles ``/{role_id}/``, and a
        collection route declared as ``""`` also handles ``"/"``.
    
    Only the main path is included in the OpenAPI schema.
    """
    
    def api_route(
        self,
        path: str,
        *,
        include_in_schema: bool = True,
        **kwargs: Any
    ) -> Callable[[DecoratedCallable], DecoratedCallable]:
        """Register ``path`` and its alternate slash spelling for the same handler."""
        if path == "/":
            return super().api_route(path, include_in_schema=include_in_schema, **kwargs)
        
        main_path = path
        alternate_path = path[:-1] if path.endswith("/") else path + "/"
        
        add_main_path = super().api_route(
            main_path,
            include_in_schema=include_in_schema,
            **kwargs
        )
        add_alternate_path = super().api_route(
            alternate_path,
            include_in_schema=False,
            **kwargs
        )
        
        def decorator(func: DecoratedCallable) -> DecoratedCallable:
            logger.debug(
                f"Registering {kwargs.get('methods', ['GET'])} "
                f"{self.prefix}{main_path} -> {getattr(func, '__name__', 'unknown')}"
            )
            
            add_alternate_path(func)
            return add_main_path(func)
        
        return decorator
