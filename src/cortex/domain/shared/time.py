"""UTC helpers. Every timestamp in Cortex is timezone-aware."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(value: datetime) -> datetime:
    """Attach UTC to naive values (SQLite drops the offset on read)."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
