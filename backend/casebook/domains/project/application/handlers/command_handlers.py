"""Command handlers for the project context."""
from __future__ import annotations

from casebook.domains.project.application.commands.project_commands import (
    CreateProjectCommand,
    DeleteProjectCommand,
    UpdateProjectCommand,
)
from casebook.domains.project.domain.entities import Project
from casebook.infrastructure.cqrs import CommandHandler
from casebook.shared_kernel.resources import CreateResource, DeleteResource, UpdateResource


class CreateProjectHandler(CommandHandler[CreateProjectCommand, Project]):
    def __init__(self, create: CreateResource[Project]) -> None:
        self.create = create

    async def handle(self, command: CreateProjectCommand) -> Project:
        return await self.create(command.ctx, command.author, command.data)


class UpdateProjectHandler(CommandHandler[UpdateProjectCommand, Project]):
    def __init__(self, update: UpdateResource[Project]) -> None:
        self.update = update

    async def handle(self, command: UpdateProjectCommand) -> Project:
        return await self.update(command.ctx, command.user, command.project_id, command.data)


class DeleteProjectHandler(CommandHandler[DeleteProjectCommand, None]):
    def __init__(self, delete: DeleteResource) -> None:
        self.delete = delete

    async def handle(self, command: DeleteProjectCommand) -> None:
        await self.delete(command.ctx, command.project_id)
