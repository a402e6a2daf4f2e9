"""Request-scoped execution context passed through to store capabilities."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class RequestContext:
    """Correlation id plus an optional monotonic deadline.

    Operations never inspect the context; stores decide how to honour it.
    """

    correlation_id: UUID = field(default_factory=uuid4)
    deadline: Optional[float] = None

    @classmethod
    def create(cls, timeout: Optional[float] = None, correlation_id: Optional[UUID] = None) -> "RequestContext":
        deadline = time.monotonic() + timeout if timeout is not None else None
        return cls(correlation_id=correlation_id or uuid4(), deadline=deadline)

    @classmethod
    def background(cls) -> "RequestContext":
        return cls()

    def remaining(self) -> Optional[float]:
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline
