"""Utility helpers."""

from .datetime import utc_now, utc_now_iso, to_iso
from .uuid import generate_uuid_v7

__all__ = [
    "utc_now",
    "utc_now_iso",
    "to_iso",
    "generate_uuid_v7",
]
