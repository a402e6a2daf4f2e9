"""Query handlers for the project context."""
from __future__ import annotations

from typing import List

from casebook.domains.project.application.queries.project_queries import (
    GetProjectQuery,
    ListProjectsQuery,
)
from casebook.domains.project.domain.entities import Project
from casebook.infrastructure.cqrs import QueryHandler
from casebook.shared_kernel.resources import GetResource, ListResources


class GetProjectHandler(QueryHandler[GetProjectQuery, Project]):
    def __init__(self, get: GetResource[Project]) -> None:
        self.get = get

    async def handle(self, query: GetProjectQuery) -> Project:
        return await self.get(query.ctx, query.project_id)


class ListProjectsHandler(QueryHandler[ListProjectsQuery, List[Project]]):
    def __init__(self, list_projects: ListResources[Project]) -> None:
        self.list_projects = list_projects

    async def handle(self, query: ListProjectsQuery) -> List[Project]:
        return await self.list_projects(query.ctx)
