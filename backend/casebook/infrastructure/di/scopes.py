"""Service lifetimes for the DI container."""
from enum import Enum


class Scope(Enum):
    SINGLETON = "singleton"  # one instance per container
    SCOPED = "scoped"  # one instance per request scope
    TRANSIENT = "transient"  # new instance on every resolve
