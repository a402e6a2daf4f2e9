"""Identity and audit metadata stamping."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional
from uuid import uuid4

from casebook.shared_kernel.capabilities import IdentityGenerator
from casebook.shared_kernel.entity import Entity
from casebook.shared_kernel.exceptions import IdentityError
from casebook.shared_kernel.identity import Identity, as_utc
from casebook.shared_kernel.resources import Clock, utc_now

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid4())


class MetadataStamper(IdentityGenerator):
    """Assign a fresh id plus creation metadata to new entities."""

    def __init__(
        self,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.id_factory = id_factory or _new_id
        self.clock = clock or utc_now

    def add_meta(self, author: str, object_type: str, identifiable: Entity) -> None:
        if not author:
            raise IdentityError("author is required to stamp an identity", details={"type": object_type})
        try:
            new_id = str(self.id_factory())
            now: datetime = as_utc(self.clock())
        except Exception as exc:
            raise IdentityError(
                f"could not generate identity: {exc}",
                details={"type": object_type},
            ) from exc
        if not new_id:
            raise IdentityError("generated an empty id", details={"type": object_type})

        identifiable.add_identity(
            Identity(
                id=new_id,
                type=object_type,
                created_by=author,
                create_time=now,
                updated_by=author,
                update_time=now,
            )
        )
        logger.debug("Stamped %s %s for %s", object_type, new_id, author)
