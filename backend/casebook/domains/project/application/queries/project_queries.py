"""Query models for projects."""
from dataclasses import dataclass

from casebook.infrastructure.cqrs import Query
from casebook.shared_kernel.context import RequestContext


@dataclass(frozen=True)
class GetProjectQuery(Query):
    ctx: RequestContext
    project_id: str


@dataclass(frozen=True)
class ListProjectsQuery(Query):
    ctx: RequestContext
