"""Service-level endpoints."""
