"""casebook bootstrap: logging plus a configured container."""
from __future__ import annotations

from typing import Optional

from casebook.core.config import Settings, settings as default_settings
from casebook.infrastructure.cqrs import Mediator
from casebook.infrastructure.di import Container, configure_container
from casebook.infrastructure.observability import configure_structlog, get_logger


def bootstrap(config: Optional[Settings] = None, container: Optional[Container] = None) -> Container:
    """Configure logging and register all services on ``container``."""
    config = config or default_settings
    configure_structlog(level=config.LOG_LEVEL, json=config.LOG_JSON)

    container = container or Container.get_instance()
    if not container.is_registered(Mediator):
        configure_container(container, config)

    get_logger(__name__).info(
        "casebook ready",
        app_env=config.APP_ENV,
        store_backend=config.STORE_BACKEND,
        version=config.VERSION,
    )
    return container
