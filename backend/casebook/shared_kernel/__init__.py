"""Shared kernel primitives (identity, capabilities, operations, errors)."""

from .capabilities import (
    Adder,
    Getter,
    Deleter,
    Updater,
    ReaderUpdater,
    IdentityGenerator,
    Decoder,
    Payload,
)
from .context import RequestContext
from .entity import Entity
from .exceptions import (
    DomainException,
    ValidationError,
    DecodeError,
    EntityNotFoundError,
    StoreError,
    IdentityError,
    http_status_for,
)
from .identity import Identity
from .resources import (
    CreateResource,
    ListResources,
    GetResource,
    DeleteResource,
    UpdateResource,
)

__all__ = [
    "Adder",
    "Getter",
    "Deleter",
    "Updater",
    "ReaderUpdater",
    "IdentityGenerator",
    "Decoder",
    "Payload",
    "RequestContext",
    "Entity",
    "DomainException",
    "ValidationError",
    "DecodeError",
    "EntityNotFoundError",
    "StoreError",
    "IdentityError",
    "http_status_for",
    "Identity",
    "CreateResource",
    "ListResources",
    "GetResource",
    "DeleteResource",
    "UpdateResource",
]
