"""CQRS infrastructure for commands and queries."""

from .registry import HandlerRegistry
from .command_bus import Command, CommandHandler, CommandBus
from .query_bus import Query, QueryHandler, QueryBus
from .mediator import Mediator

__all__ = [
    "HandlerRegistry",
    "Command",
    "CommandHandler",
    "CommandBus",
    "Query",
    "QueryHandler",
    "QueryBus",
    "Mediator",
]
