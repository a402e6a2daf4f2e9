"""Generic CRUD operations for identity-stamped resources.

Every operation object is built once with the capabilities it needs and then
called per request. Operations hold no state between calls, never log, and
let every error propagate unchanged to the caller.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Generic, List, Optional, Type

from .capabilities import (
    Adder,
    Decoder,
    Deleter,
    Getter,
    IdentityGenerator,
    Payload,
    ReaderUpdater,
    T,
)
from .context import RequestContext
from .exceptions import StoreError

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CreateResource(Generic[T]):
    """Decode, validate, stamp and persist a new resource."""

    def __init__(
        self,
        stamper: IdentityGenerator,
        store: Adder[T],
        entity_type: Type[T],
        object_type: str,
        decoder: Decoder,
    ) -> None:
        self.stamper = stamper
        self.store = store
        self.entity_type = entity_type
        self.object_type = object_type
        self.decoder = decoder

    async def __call__(self, ctx: RequestContext, author: str, data: Payload) -> T:
        item = self.decoder.decode(self.entity_type, data)
        item.validate()
        self.stamper.add_meta(author, self.object_type, item)
        await self.store.add(ctx, item)
        return item


class ListResources(Generic[T]):
    def __init__(self, store: Getter[T]) -> None:
        self.store = store

    async def __call__(self, ctx: RequestContext) -> List[T]:
        return list(await self.store.get_all(ctx))


class GetResource(Generic[T]):
    def __init__(self, store: Getter[T]) -> None:
        self.store = store

    async def __call__(self, ctx: RequestContext, id: str) -> T:
        return await self.store.get(ctx, id)


class DeleteResource:
    def __init__(self, store: Deleter) -> None:
        self.store = store

    async def __call__(self, ctx: RequestContext, id: str) -> None:
        await self.store.delete(ctx, id)


class UpdateResource(Generic[T]):
    """Replace a stored resource while keeping its identity.

    The decoded payload's own identity is always discarded: creation fields
    come from the stored record, update fields from ``user`` and the clock.
    The write is a wholesale replacement, not a field-level merge.
    """

    def __init__(
        self,
        store: ReaderUpdater[T],
        entity_type: Type[T],
        decoder: Decoder,
        clock: Optional[Clock] = None,
    ) -> None:
        self.store = store
        self.entity_type = entity_type
        self.decoder = decoder
        self.clock = clock or utc_now
        self._get = GetResource(store)

    async def __call__(self, ctx: RequestContext, user: str, id: str, data: Payload) -> T:
        item = self.decoder.decode(self.entity_type, data)
        item.validate()

        found = await self._get(ctx, id)
        if not isinstance(found, self.entity_type) or found.identity is None:
            raise StoreError(
                "invalid data structure in store",
                details={"id": id, "type": type(found).__name__},
            )

        item.identity = found.identity.touched(user, self.clock())
        await self.store.update(ctx, id, item)
        return item
