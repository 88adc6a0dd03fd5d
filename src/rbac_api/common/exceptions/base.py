"""
Base exception classes for the application.

Every error raised by repository logic carries a machine-readable ``ErrorKind``;
HTTP handlers pick the status code from the kind, never from the message text.
"""
from enum import Enum
from typing import Dict, Iterable, Optional


class ErrorKind(str, Enum):
    """Closed set of error kinds surfaced by the API."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNKNOWN = "unknown"


HTTP_STATUS_MAP: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.UNKNOWN: 500,
}


class RbacApiError(Exception):
    """Base exception for all application exceptions."""
    
    kind: ErrorKind = ErrorKind.UNKNOWN
    
    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        kind: Optional[ErrorKind] = None
    ):
        self.message = message
        self.details = details
        if kind is not None:
            self.kind = kind
        super().__init__(self.message)
    
    @property
    def status_code(self) -> int:
        """HTTP status code for this error's kind."""
        return HTTP_STATUS_MAP[self.kind]


class ValidationError(RbacApiError):
    """Raised when input is missing or malformed."""
    
    kind = ErrorKind.VALIDATION


class NotFoundError(RbacApiError):
    """Raised when a resource is not found."""
    
    kind = ErrorKind.NOT_FOUND
    
    def __init__(
        self,
        resource: str,
        message: Optional[str] = None,
        details: Optional[str] = None
    ):
        super().__init__(message or f"{resource} not found", details=details)


class ConflictError(RbacApiError):
    """Raised when a uniqueness or referential rule would be broken."""
    
    kind = ErrorKind.CONFLICT
    
    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[str] = None
    ):
        super().__init__(message, details=details)


class UnknownError(RbacApiError):
    """Raised for unexpected failures."""
    
    kind = ErrorKind.UNKNOWN


class StoreError(UnknownError):
    """Raised when a call to the remote store fails."""
    
    def __init__(
        self,
        message: str = "Store operation failed",
        details: Optional[str] = None,
        operation: Optional[str] = None
    ):
        super().__init__(message, details=details)
        self.operation = operation


class ConfigurationError(UnknownError):
    """Raised when required configuration is missing or invalid."""


class RolesNotFoundError(NotFoundError):
    """Raised when role names given for an assignment do not resolve."""
    
    def __init__(self, missing_names: Iterable[str]):
        self.missing_names = list(missing_names)
        super().__init__(
            "Role",
            message="One or more roles not found",
            details=f"Roles not found: {', '.join(self.missing_names)}"
        )


class UnsupportedVersionError(ValidationError):
    """Raised when a request names an API version that is not active."""
    
    def __init__(self, version: str, supported_versions: Iterable[str]):
        self.version = version
        self.supported_versions = list(supported_versions)
        super().__init__(
            "Unsupported API version",
            details=f"Supported versions: {', '.join(self.supported_versions)}"
        )
