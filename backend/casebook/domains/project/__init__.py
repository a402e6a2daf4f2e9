"""Project bounded context."""

from .domain.entities import Project, PROJECT_OBJECT_TYPE
from .application.commands.project_commands import (
    CreateProjectCommand,
    UpdateProjectCommand,
    DeleteProjectCommand,
)
from .application.queries.project_queries import GetProjectQuery, ListProjectsQuery

__all__ = [
    "Project",
    "PROJECT_OBJECT_TYPE",
    "CreateProjectCommand",
    "UpdateProjectCommand",
    "DeleteProjectCommand",
    "GetProjectQuery",
    "ListProjectsQuery",
]
