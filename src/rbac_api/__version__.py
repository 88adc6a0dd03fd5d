"""Version information for rbac-store-api."""

__version__ = "1.2.0"
