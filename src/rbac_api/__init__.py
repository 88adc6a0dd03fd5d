"""RBAC Store API - user/role access control store with versioned role resources.

Feature-First layout:
- common/: configuration, logging, errors, envelopes, versioning and store adapters
- features/roles/: role CRUD, role assignment and permission derivation
- features/users/: user CRUD with soft delete
"""

from .__version__ import __version__

__all__ = ["__version__"]
