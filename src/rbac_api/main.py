"""RBAC Store API main entry point."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from loguru import logger

from rbac_api.common.config import get_settings, configure_logging
from rbac_api.common.exceptions import ConfigurationError


def _load_env_files() -> None:
    """Load ``.env`` then ``.env.local`` overrides from the working directory."""
    for name, override in ((".env", False), (".env.local", True)):
        env_file = Path.cwd() / name
        if env_file.exists():
            load_dotenv(env_file, override=override)
            logger.info(f"Loaded environment variables from {env_file}")


def main() -> None:
    """Run the application."""
    _load_env_files()
    get_settings.cache_clear()
    settings = get_settings()
    configure_logging(settings)
    
    try:
        settings.validate_store_config()
    except ConfigurationError as e:
        logger.error(e.message)
        raise SystemExit(1)
    
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    
    uvicorn.run(
        "rbac_api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level="debug" if settings.debug else "info",
        access_log=False,
    )


if __name__ == "__main__":
    main()
