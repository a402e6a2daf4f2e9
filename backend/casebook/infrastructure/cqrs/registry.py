"""Request-type to handler registry shared by the command and query buses."""
from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, Generic, Type, TypeVar

TRequest = TypeVar("TRequest")
THandler = TypeVar("THandler")

logger = logging.getLogger(__name__)


class HandlerRegistry(Generic[TRequest, THandler]):
    """One handler per concrete request type.

    Subclasses set ``request_type`` to the marker base their requests derive
    from; registering anything else, or a second handler for the same type,
    raises ValueError.
    """

    request_type: ClassVar[type]

    def __init__(self) -> None:
        self._handlers: Dict[Type[TRequest], THandler] = {}

    def register(self, request_type: Type[TRequest], handler: THandler) -> None:
        if not (isinstance(request_type, type) and issubclass(request_type, self.request_type)):
            raise ValueError(
                f"{type(self).__name__} only accepts {self.request_type.__name__} types, "
                f"got {request_type!r}"
            )
        if request_type in self._handlers:
            raise ValueError(f"Handler already registered for {request_type.__name__}")
        self._handlers[request_type] = handler

    def is_registered(self, request_type: Type[TRequest]) -> bool:
        return request_type in self._handlers

    def handler_for(self, request: TRequest) -> THandler:
        request_type = type(request)
        if request_type not in self._handlers:
            raise ValueError(f"No handler registered for {request_type.__name__}")
        return self._handlers[request_type]

    async def dispatch(self, request: TRequest) -> Any:
        handler = self.handler_for(request)
        logger.debug("Dispatching %s to %s", type(request).__name__, type(handler).__name__)
        return await handler.handle(request)  # type: ignore[attr-defined]
