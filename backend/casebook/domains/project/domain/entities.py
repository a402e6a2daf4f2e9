"""Project domain entities."""
from dataclasses import dataclass

from casebook.shared_kernel.entity import Entity
from casebook.shared_kernel.exceptions import ValidationError

PROJECT_OBJECT_TYPE = "project"


@dataclass
class Project(Entity):
    """Umbrella for test cases that refer to the same product."""

    name: str = ""
    description: str = ""

    def validate(self) -> None:
        if not self.name:
            raise ValidationError(
                "name is a mandatory parameter",
                details={"field": "name"},
            )
