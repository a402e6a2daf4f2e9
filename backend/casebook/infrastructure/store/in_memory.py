"""In-memory collection for tests and local usage."""
from __future__ import annotations

import copy
import logging
from typing import Dict, Generic, List, Type

from casebook.shared_kernel.capabilities import Adder, Deleter, ReaderUpdater, T
from casebook.shared_kernel.context import RequestContext
from casebook.shared_kernel.exceptions import EntityNotFoundError, StoreError

logger = logging.getLogger(__name__)


class InMemoryCollection(Adder[T], ReaderUpdater[T], Deleter, Generic[T]):
    """Dict-backed collection keyed by ``identity.id``.

    Items are deep-copied on the way in and out so callers never share
    mutable state with the store. Iteration order is insertion order.
    """

    def __init__(self, entity_type: Type[T], name: str = "") -> None:
        self.entity_type = entity_type
        self.name = name or entity_type.__name__.lower()
        self._items: Dict[str, T] = {}

    def _check(self, ctx: RequestContext) -> None:
        if ctx.expired:
            raise StoreError(
                "deadline exceeded",
                details={"collection": self.name, "correlation_id": str(ctx.correlation_id)},
            )

    def _not_found(self, id: str) -> EntityNotFoundError:
        return EntityNotFoundError(
            f"{self.name} {id!r} not found",
            details={"collection": self.name, "id": id},
        )

    async def add(self, ctx: RequestContext, item: T) -> None:
        self._check(ctx)
        identity = item.get_identity()
        if identity is None:
            raise StoreError("cannot add an item without identity", details={"collection": self.name})
        if identity.id in self._items:
            raise StoreError(
                f"{self.name} {identity.id!r} already exists",
                details={"collection": self.name, "id": identity.id},
            )
        self._items[identity.id] = copy.deepcopy(item)
        logger.debug("Added %s %s (correlation_id=%s)", self.name, identity.id, ctx.correlation_id)

    async def get(self, ctx: RequestContext, id: str) -> T:
        self._check(ctx)
        if id not in self._items:
            raise self._not_found(id)
        return copy.deepcopy(self._items[id])

    async def get_all(self, ctx: RequestContext) -> List[T]:
        self._check(ctx)
        return [copy.deepcopy(item) for item in self._items.values()]

    async def update(self, ctx: RequestContext, id: str, item: T) -> None:
        self._check(ctx)
        if id not in self._items:
            raise self._not_found(id)
        identity = item.get_identity()
        if identity is None or identity.id != id:
            raise StoreError(
                f"{self.name} identity does not match {id!r}",
                details={
                    "collection": self.name,
                    "id": id,
                    "identity_id": identity.id if identity else None,
                },
            )
        self._items[id] = copy.deepcopy(item)
        logger.debug("Updated %s %s (correlation_id=%s)", self.name, id, ctx.correlation_id)

    async def delete(self, ctx: RequestContext, id: str) -> None:
        self._check(ctx)
        if id not in self._items:
            raise self._not_found(id)
        del self._items[id]
        logger.debug("Deleted %s %s (correlation_id=%s)", self.name, id, ctx.correlation_id)

    def __len__(self) -> int:
        return len(self._items)
