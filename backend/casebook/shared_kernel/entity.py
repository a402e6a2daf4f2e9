"""Base entity shape for resources handled by the shared operations."""
from dataclasses import dataclass
from typing import Optional

from .identity import Identity


@dataclass
class Entity:
    """Anything that carries an identity and can check its own constraints."""

    identity: Optional[Identity] = None

    def get_identity(self) -> Optional[Identity]:
        return self.identity

    def add_identity(self, identity: Identity) -> None:
        self.identity = identity

    def validate(self) -> None:
        """Raise ValidationError when constraints are not met."""
