"""Project command/query handlers."""
from casebook.domains.project.application.commands.project_commands import (
    CreateProjectCommand,
    DeleteProjectCommand,
    UpdateProjectCommand,
)
from casebook.domains.project.application.operations import ProjectOperations
from casebook.domains.project.application.queries.project_queries import (
    GetProjectQuery,
    ListProjectsQuery,
)
from casebook.infrastructure.cqrs import CommandBus, QueryBus

from .command_handlers import CreateProjectHandler, DeleteProjectHandler, UpdateProjectHandler
from .query_handlers import GetProjectHandler, ListProjectsHandler


def register_project_handlers(
    operations: ProjectOperations,
    command_bus: CommandBus,
    query_bus: QueryBus,
) -> None:
    command_bus.register(CreateProjectCommand, CreateProjectHandler(operations.create))
    command_bus.register(UpdateProjectCommand, UpdateProjectHandler(operations.update))
    command_bus.register(DeleteProjectCommand, DeleteProjectHandler(operations.delete))
    query_bus.register(GetProjectQuery, GetProjectHandler(operations.get))
    query_bus.register(ListProjectsQuery, ListProjectsHandler(operations.list))


__all__ = [
    "CreateProjectHandler",
    "UpdateProjectHandler",
    "DeleteProjectHandler",
    "GetProjectHandler",
    "ListProjectsHandler",
    "register_project_handlers",
]
