"""Narrow capability interfaces consumed by resource operations.

Each interface groups only what a single use case needs, so an operation can
ask for exactly the store surface it touches (e.g. Update wants a
``ReaderUpdater``, Delete only a ``Deleter``).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Generic, List, Type, TypeVar, Union

from .context import RequestContext
from .entity import Entity

T = TypeVar("T", bound=Entity)

Payload = Union[bytes, str, IO[bytes], IO[str]]


class Adder(ABC, Generic[T]):
    @abstractmethod
    async def add(self, ctx: RequestContext, item: T) -> None:
        raise NotImplementedError


class Getter(ABC, Generic[T]):
    """Retrieve items from the store."""

    @abstractmethod
    async def get(self, ctx: RequestContext, id: str) -> T:
        """Return the item stored under ``id`` or raise EntityNotFoundError."""
        raise NotImplementedError

    @abstractmethod
    async def get_all(self, ctx: RequestContext) -> List[T]:
        raise NotImplementedError


class Deleter(ABC):
    @abstractmethod
    async def delete(self, ctx: RequestContext, id: str) -> None:
        """Remove the item stored under ``id`` or raise EntityNotFoundError."""
        raise NotImplementedError


class Updater(ABC, Generic[T]):
    @abstractmethod
    async def update(self, ctx: RequestContext, id: str, item: T) -> None:
        raise NotImplementedError


class ReaderUpdater(Getter[T], Updater[T], ABC):
    pass


class IdentityGenerator(ABC):
    @abstractmethod
    def add_meta(self, author: str, object_type: str, identifiable: Entity) -> None:
        """Attach a new identity to ``identifiable`` or raise IdentityError."""
        raise NotImplementedError


class Decoder(ABC):
    @abstractmethod
    def decode(self, entity_type: Type[T], data: Payload) -> T:
        """Parse ``data`` into a new ``entity_type`` or raise DecodeError."""
        raise NotImplementedError
