"""Dependency injection container and providers."""

from .container import Container
from .scopes import Scope
from .providers import configure_container, get_configured_container

__all__ = [
    "Container",
    "Scope",
    "configure_container",
    "get_configured_container",
]
