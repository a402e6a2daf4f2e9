"""Project repositories."""
from __future__ import annotations

from casebook.domains.project.domain.entities import PROJECT_OBJECT_TYPE, Project
from casebook.domains.project.domain.repositories import ProjectRepository
from casebook.infrastructure.store import InMemoryCollection


class InMemoryProjectRepository(InMemoryCollection[Project], ProjectRepository):
    def __init__(self) -> None:
        super().__init__(Project, name=PROJECT_OBJECT_TYPE)
