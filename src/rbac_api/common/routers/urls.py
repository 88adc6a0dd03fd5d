"""Helpers for hypermedia links and ``Location`` headers."""

from fastapi import Request


def current_url(request: Request) -> str:
    """Request URL without query string or trailing slash."""
    return str(request.url.replace(query="")).rstrip("/")


def child_url(request: Request, key: str) -> str:
    """URL of ``key`` under the collection addressed by the request."""
    return f"{current_url(request)}/{key}"
