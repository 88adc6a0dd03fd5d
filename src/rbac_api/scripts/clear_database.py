#!/usr/bin/env python3
"""
Remove every user, role and assignment from the configured store.

Usage:
    rbac-store-clear-db          # asks for confirmation
    rbac-store-clear-db --yes    # no prompt
"""
import argparse
import asyncio
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv
from loguru import logger

from rbac_api.common.config import Settings, configure_logging, get_settings
from rbac_api.common.exceptions import RbacApiError
from rbac_api.common.store import COLLECTIONS, DocumentStore, build_store


async def clear_database(store: DocumentStore) -> None:
    """Drop every collection and release the store."""
    try:
        await store.clear()
    finally:
        await store.close()


def _confirm(settings: Settings) -> bool:
    target = settings.app_database_url or settings.store_backend
    answer = input(f"Delete all of {', '.join(COLLECTIONS)} from {target}? [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    parser = argparse.ArgumentParser(description="Remove all data from the RBAC store")
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Do not ask for confirmation"
    )
    args = parser.parse_args(argv)
    
    load_dotenv()
    settings = get_settings()
    configure_logging(settings)
    
    try:
        settings.validate_store_config()
        if not args.yes and not _confirm(settings):
            logger.info("Aborted; nothing was deleted")
            return 1
        store = build_store(settings)
        asyncio.run(clear_database(store))
    except RbacApiError as e:
        logger.error(f"Error clearing database: {e.message}" + (f" ({e.details})" if e.details else ""))
        return 1
    
    logger.info("Database cleared successfully")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
