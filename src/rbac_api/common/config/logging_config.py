"""Centralized logging configuration.

Loguru is the single sink for the service. Standard-library loggers (uvicorn,
firebase-admin, httpx) are intercepted and forwarded so every line shares
one format and destination.
"""

import logging
import sys
from typing import Optional

from loguru import logger

from .settings import Settings


class InterceptHandler(logging.Handler):
    """Forward standard-library log records to loguru."""
    
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        
        # Walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Modules that should only log warnings and above
    QUIET_MODULES = [
        "httpx",
        "httpcore",
        "urllib3",
        "asyncio",
        "google.auth",
        "firebase_admin",
    ]
    
    _configured = False
    
    @classmethod
    def configure(cls, settings: Settings) -> None:
        """Configure loguru sinks and standard-library interception."""
        level = settings.log_level.upper()
        
        logger.remove()
        logger.add(
            sys.stderr,
            level=level,
            format=settings.log_format,
            backtrace=settings.debug,
            diagnose=settings.debug,
        )
        
        if settings.log_file:
            logger.add(
                settings.log_file,
                level=level,
                format=settings.log_format,
                rotation=settings.log_rotation,
                retention=settings.log_retention,
                enqueue=True,
            )
        
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            std_logger = logging.getLogger(name)
            std_logger.handlers = [InterceptHandler()]
            std_logger.propagate = False
        
        for module in cls.QUIET_MODULES:
            logging.getLogger(module).setLevel(logging.WARNING)
        
        cls._configured = True
        logger.debug(f"Logging configured: level={level}, file={settings.log_file}")
    
    @classmethod
    def get_logger(cls, component: str, **context):
        """Get a loguru logger bound to a component name.
        
        Args:
            component: Component name recorded in every line's ``extra``
            **context: Additional static context to bind
            
        Returns:
            Bound loguru logger
        """
        return logger.bind(component=component, **context)
    
    @classmethod
    def is_configured(cls) -> bool:
        return cls._configured


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging from settings (defaults to the cached settings)."""
    if settings is None:
        from .settings import get_settings
        settings = get_settings()
    LoggingConfig.configure(settings)
