"""Roles, permissions and user-role assignments."""
