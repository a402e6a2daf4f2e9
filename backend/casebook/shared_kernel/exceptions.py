"""Shared kernel exception hierarchy."""
from typing import Optional, Dict, Any


class DomainException(Exception):
    """Base exception for all domain errors."""

    code = "domain_error"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.code
        self.details = details or {}


class ValidationError(DomainException):
    """Raised when an entity fails its semantic constraints."""

    code = "validation_error"


class DecodeError(DomainException):
    """Raised when an input payload is malformed or does not fit the entity shape."""

    code = "decode_error"


class EntityNotFoundError(DomainException):
    """Raised when a domain entity is not found."""

    code = "not_found"


class StoreError(DomainException):
    """Raised when the persistence backend fails for reasons other than existence."""

    code = "store_error"


class IdentityError(DomainException):
    """Raised when identity/metadata stamping fails."""

    code = "identity_error"


_HTTP_STATUS = {
    ValidationError: 400,
    DecodeError: 400,
    EntityNotFoundError: 404,
    StoreError: 500,
    IdentityError: 500,
}


def http_status_for(exc: BaseException) -> int:
    """Return the conventional HTTP status code for a domain error."""
    for error_type, status_code in _HTTP_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return 500
