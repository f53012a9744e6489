from datetime import datetime, timezone


def materialize_timestamp(
    value: datetime | None, default_now: bool = False
) -> datetime | None:
    """Return the stored timestamp, or the current UTC time when asked to fill gaps."""
    if value:
        return value
    if default_now:
        return datetime.now(timezone.utc)
    return None
