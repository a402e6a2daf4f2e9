"""Queries: read-only requests."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .registry import HandlerRegistry

TQuery = TypeVar("TQuery", bound="Query")
TResult = TypeVar("TResult")


class Query(ABC):
    """Marker base class for queries."""


class QueryHandler(ABC, Generic[TQuery, TResult]):
    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        raise NotImplementedError


class QueryBus(HandlerRegistry[Query, QueryHandler]):
    request_type = Query
