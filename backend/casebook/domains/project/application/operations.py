"""Project CRUD operations bound to the shared resource operations."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from casebook.domains.project.domain.entities import PROJECT_OBJECT_TYPE, Project
from casebook.domains.project.domain.repositories import ProjectRepository
from casebook.shared_kernel.capabilities import (
    Adder,
    Decoder,
    Deleter,
    Getter,
    IdentityGenerator,
    ReaderUpdater,
)
from casebook.shared_kernel.resources import (
    Clock,
    CreateResource,
    DeleteResource,
    GetResource,
    ListResources,
    UpdateResource,
)


def new(stamper: IdentityGenerator, store: Adder[Project], decoder: Decoder) -> CreateResource[Project]:
    return CreateResource(stamper, store, Project, PROJECT_OBJECT_TYPE, decoder)


def list_projects(store: Getter[Project]) -> ListResources[Project]:
    return ListResources(store)


def get(store: Getter[Project]) -> GetResource[Project]:
    return GetResource(store)


def delete(store: Deleter) -> DeleteResource:
    return DeleteResource(store)


def update(
    store: ReaderUpdater[Project],
    decoder: Decoder,
    clock: Optional[Clock] = None,
) -> UpdateResource[Project]:
    return UpdateResource(store, Project, decoder, clock=clock)


@dataclass(frozen=True)
class ProjectOperations:
    create: CreateResource[Project]
    list: ListResources[Project]
    get: GetResource[Project]
    delete: DeleteResource
    update: UpdateResource[Project]

    @classmethod
    def build(
        cls,
        stamper: IdentityGenerator,
        store: ProjectRepository,
        decoder: Decoder,
        clock: Optional[Clock] = None,
    ) -> "ProjectOperations":
        return cls(
            create=new(stamper, store, decoder),
            list=list_projects(store),
            get=get(store),
            delete=delete(store),
            update=update(store, decoder, clock=clock),
        )
