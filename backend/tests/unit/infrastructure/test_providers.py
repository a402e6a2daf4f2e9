import pytest

from casebook.core.config import Settings
from casebook.domains.project import CreateProjectCommand, GetProjectQuery
from casebook.domains.project.application.operations import ProjectOperations
from casebook.domains.project.domain.repositories import ProjectRepository
from casebook.domains.project.infrastructure.repositories import InMemoryProjectRepository
from casebook.infrastructure.cqrs import Mediator
from casebook.infrastructure.decoding import JsonDecoder
from casebook.infrastructure.di import Container, configure_container
from casebook.infrastructure.identity import MetadataStamper
from casebook.main import bootstrap
from casebook.shared_kernel.capabilities import Decoder, IdentityGenerator
from casebook.shared_kernel.context import RequestContext


@pytest.fixture
def container():
    container = Container()
    configure_container(container, Settings(_env_file=None, REQUEST_TIMEOUT_SECONDS=30))
    return container


def test_collaborators_are_registered(container):
    assert isinstance(container.resolve(Decoder), JsonDecoder)
    assert isinstance(container.resolve(IdentityGenerator), MetadataStamper)
    assert isinstance(container.resolve(ProjectRepository), InMemoryProjectRepository)
    assert isinstance(container.resolve(ProjectOperations), ProjectOperations)


def test_request_context_is_scoped(container):
    with container.create_scope():
        ctx = container.resolve(RequestContext)
        assert container.resolve(RequestContext) is ctx
        assert ctx.deadline is not None
    with container.create_scope():
        assert container.resolve(RequestContext) is not ctx


@pytest.mark.asyncio
async def test_mediator_is_wired_to_the_project_repository(container):
    mediator = container.resolve(Mediator)
    with container.create_scope():
        ctx = container.resolve(RequestContext)
        created = await mediator.send(CreateProjectCommand(ctx, "alice", b'{"name": "Checkout"}'))
        fetched = await mediator.send(GetProjectQuery(ctx, created.identity.id))

    assert fetched == created
    assert len(container.resolve(ProjectRepository)) == 1


def test_bootstrap_configures_given_container():
    container = Container()
    result = bootstrap(Settings(_env_file=None, LOG_JSON=False), container=container)
    assert result is container
    assert container.is_registered(Mediator)
