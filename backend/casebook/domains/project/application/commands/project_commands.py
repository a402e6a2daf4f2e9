"""Commands for the project context."""
from dataclasses import dataclass

from casebook.infrastructure.cqrs import Command
from casebook.shared_kernel.capabilities import Payload
from casebook.shared_kernel.context import RequestContext


@dataclass(frozen=True)
class CreateProjectCommand(Command):
    ctx: RequestContext
    author: str
    data: Payload


@dataclass(frozen=True)
class UpdateProjectCommand(Command):
    ctx: RequestContext
    user: str
    project_id: str
    data: Payload


@dataclass(frozen=True)
class DeleteProjectCommand(Command):
    ctx: RequestContext
    project_id: str
