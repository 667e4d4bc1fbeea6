from datetime import UTC, datetime

from fastapi import Request

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(DATE_FORMAT)


def utc_now() -> datetime:
    """Return the current UTC time truncated to whole seconds."""
    return datetime.now(tz=UTC).replace(microsecond=0)


def format_timestamp(value: datetime | None, default: str = "No updates") -> str:
    """
    Format a stored timestamp for responses.

    Args:
        value: Timestamp from the database (naive values are treated as UTC)
        default: Text returned when the timestamp is missing

    Returns:
        str: Local time formatted as ``%Y-%m-%d %H:%M:%S``
    """
    if value is None:
        return default
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone().strftime(DATE_FORMAT)
