"""Store backends implementing the shared capability interfaces."""

from .in_memory import InMemoryCollection

__all__ = ["InMemoryCollection"]
