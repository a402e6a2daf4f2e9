"""Commands: requests that change stored state."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .registry import HandlerRegistry

TCommand = TypeVar("TCommand", bound="Command")
TResult = TypeVar("TResult")


class Command(ABC):
    """Marker base class for commands."""


class CommandHandler(ABC, Generic[TCommand, TResult]):
    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        raise NotImplementedError


class CommandBus(HandlerRegistry[Command, CommandHandler]):
    request_type = Command
