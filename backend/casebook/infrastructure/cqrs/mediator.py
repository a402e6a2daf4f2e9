"""Single entry point routing commands and queries to their bus."""
from __future__ import annotations

from typing import Any, Union

from .command_bus import Command, CommandBus
from .query_bus import Query, QueryBus
from .registry import HandlerRegistry


class Mediator:
    def __init__(self, command_bus: CommandBus, query_bus: QueryBus) -> None:
        self.command_bus = command_bus
        self.query_bus = query_bus

    def _bus_for(self, request: object) -> HandlerRegistry:
        for bus in (self.command_bus, self.query_bus):
            if isinstance(request, bus.request_type):
                return bus
        raise ValueError(f"Unknown request type: {type(request)}")

    async def send(self, request: Union[Command, Query]) -> Any:
        return await self._bus_for(request).dispatch(request)
