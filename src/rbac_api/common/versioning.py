"""
API version registry and negotiation.

Registry order is the source of truth for "latest": the last active entry
wins, with no semantic comparison of version strings.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .exceptions import UnsupportedVersionError


class ApiVersion(str, Enum):
    """Versions of the role resource."""
    V1 = "v1"
    V2 = "v2"


@dataclass(frozen=True)
class VersionConfig:
    """Registry entry for one API version."""
    version: ApiVersion
    is_active: bool = True
    deprecated_at: Optional[str] = None
    sunset_at: Optional[str] = None


SUPPORTED_VERSIONS: Tuple[VersionConfig, ...] = (
    VersionConfig(version=ApiVersion.V1, is_active=True),
    VersionConfig(version=ApiVersion.V2, is_active=True),
)


def get_active_versions(
    registry: Tuple[VersionConfig, ...] = SUPPORTED_VERSIONS
) -> List[ApiVersion]:
    """Active versions in registry order."""
    return [entry.version for entry in registry if entry.is_active]


def is_version_supported(
    version: str,
    registry: Tuple[VersionConfig, ...] = SUPPORTED_VERSIONS
) -> bool:
    """True iff a registry entry with this exact version string is active."""
    return any(entry.version.value == version and entry.is_active for entry in registry)


def get_latest_version(
    registry: Tuple[VersionConfig, ...] = SUPPORTED_VERSIONS
) -> ApiVersion:
    """Last active entry in registry order."""
    active = get_active_versions(registry)
    if not active:
        raise UnsupportedVersionError("latest", [])
    return active[-1]


def negotiate_version(
    requested: Optional[str],
    registry: Tuple[VersionConfig, ...] = SUPPORTED_VERSIONS
) -> ApiVersion:
    """
    Resolve a requested version string, defaulting to the latest.
    
    Raises:
        UnsupportedVersionError: If the version is unknown or inactive
    """
    if requested is None:
        return get_latest_version(registry)
    
    if not is_version_supported(requested, registry):
        raise UnsupportedVersionError(
            requested,
            [version.value for version in get_active_versions(registry)]
        )
    return ApiVersion(requested)
