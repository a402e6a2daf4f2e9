import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from casebook.domains.project.application.operations import ProjectOperations  # noqa: E402
from casebook.domains.project.infrastructure.repositories import InMemoryProjectRepository  # noqa: E402
from casebook.infrastructure.decoding import JsonDecoder  # noqa: E402
from casebook.infrastructure.identity import MetadataStamper  # noqa: E402
from casebook.shared_kernel.context import RequestContext  # noqa: E402


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.calls = 0

    def __call__(self):
        value = self.now
        self.now = self.now + timedelta(seconds=1)
        self.calls += 1
        return value


@pytest.fixture
def ctx():
    return RequestContext.background()


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def decoder():
    return JsonDecoder()


@pytest.fixture
def stamper(clock):
    return MetadataStamper(clock=clock)


@pytest.fixture
def repository():
    return InMemoryProjectRepository()


@pytest.fixture
def operations(stamper, repository, decoder, clock):
    return ProjectOperations.build(stamper=stamper, store=repository, decoder=decoder, clock=clock)
