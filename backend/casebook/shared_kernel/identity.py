"""Identity value object shared by every persisted entity."""
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Identity:
    id: str
    type: str
    created_by: str
    create_time: datetime
    updated_by: str
    update_time: datetime

    def touched(self, user: str, at: datetime) -> "Identity":
        """Return a copy carrying a fresh update stamp.

        The update time always moves strictly forward, even when the clock
        reports an instant at or before the previous update.
        """
        at = as_utc(at)
        previous = as_utc(self.update_time)
        if at <= previous:
            at = previous + timedelta(microseconds=1)
        return replace(self, updated_by=user, update_time=at)
