from datetime import UTC, datetime
from typing import Optional


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column in this service stores"""
    return datetime.now(UTC).replace(tzinfo=None)


def to_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def parse_timestamp(value) -> datetime:
    """Accept a datetime or an ISO-8601 string (``Z`` suffix allowed)"""
    if isinstance(value, datetime):
        return to_utc_naive(value)
    if isinstance(value, str):
        return to_utc_naive(datetime.fromisoformat(value))
    raise ValueError(f"Unsupported timestamp value: {value!r}")


def isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat(timespec="milliseconds") + "Z"
