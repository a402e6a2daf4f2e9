"""Service registration for the DI container."""
from __future__ import annotations

from typing import Optional

from casebook.core.config import Settings, settings as default_settings
from casebook.domains.project.application.handlers import register_project_handlers
from casebook.domains.project.application.operations import ProjectOperations
from casebook.domains.project.domain.repositories import ProjectRepository
from casebook.domains.project.infrastructure.repositories import InMemoryProjectRepository
from casebook.infrastructure.cqrs import CommandBus, Mediator, QueryBus
from casebook.infrastructure.decoding import JsonDecoder
from casebook.infrastructure.di.container import Container
from casebook.infrastructure.di.scopes import Scope
from casebook.infrastructure.identity import MetadataStamper
from casebook.shared_kernel.capabilities import Decoder, IdentityGenerator
from casebook.shared_kernel.context import RequestContext


def _project_repository(config: Settings) -> ProjectRepository:
    if config.STORE_BACKEND == "memory":
        return InMemoryProjectRepository()
    raise ValueError(f"Unsupported STORE_BACKEND '{config.STORE_BACKEND}'")


def _mediator(c: Container) -> Mediator:
    command_bus = c.resolve(CommandBus)
    query_bus = c.resolve(QueryBus)
    register_project_handlers(c.resolve(ProjectOperations), command_bus, query_bus)
    return Mediator(command_bus, query_bus)


def configure_container(container: Container, config: Optional[Settings] = None) -> None:
    """Configure application dependencies."""
    config = config or default_settings

    # Collaborators
    container.register(Decoder, lambda c: JsonDecoder(), Scope.SINGLETON)
    container.register(IdentityGenerator, lambda c: MetadataStamper(), Scope.SINGLETON)
    container.register(ProjectRepository, lambda c: _project_repository(config), Scope.SINGLETON)

    # Operations
    container.register(
        ProjectOperations,
        lambda c: ProjectOperations.build(
            stamper=c.resolve(IdentityGenerator),
            store=c.resolve(ProjectRepository),
            decoder=c.resolve(Decoder),
        ),
        Scope.SINGLETON,
    )

    # Dispatch
    container.register(CommandBus, lambda c: CommandBus(), Scope.SINGLETON)
    container.register(QueryBus, lambda c: QueryBus(), Scope.SINGLETON)
    container.register(Mediator, _mediator, Scope.SINGLETON)

    # Per request
    container.register(
        RequestContext,
        lambda c: RequestContext.create(timeout=config.REQUEST_TIMEOUT_SECONDS),
        Scope.SCOPED,
    )


def get_configured_container() -> Container:
    """Return a configured container instance."""
    container = Container.get_instance()
    if not container.is_registered(Mediator):
        configure_container(container)
    return container
