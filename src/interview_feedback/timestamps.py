"""
Timestamp normalization for stored documents.

Interview documents carry ``createdAt`` in one of three forms depending on
who wrote them:

- a native ``datetime`` (Firestore returns ``DatetimeWithNanoseconds``,
  a ``datetime`` subclass),
- a protobuf ``Timestamp`` that converts itself via ``ToDatetime``,
- an ISO-8601 string.

All three normalize to milliseconds since the epoch so documents can be
sorted in memory. Anything else normalizes to 0 and sorts last.
"""

from datetime import datetime, timezone
from typing import Any, Union

from google.protobuf.timestamp_pb2 import Timestamp

CreatedAt = Union[datetime, Timestamp, str, None]


def _datetime_to_ms(value: datetime) -> int:
    # Naive values are taken as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def _iso_string_to_ms(value: str) -> int:
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return 0
    return _datetime_to_ms(parsed)


def to_timestamp_ms(value: Any) -> int:
    """
    Normalize a stored timestamp to milliseconds since the epoch.

    Args:
        value: A ``datetime``, protobuf ``Timestamp``, ISO-8601 string or None

    Returns:
        Milliseconds since the epoch, or 0 if the value is absent or unparseable
    """
    if isinstance(value, datetime):
        return _datetime_to_ms(value)
    if isinstance(value, Timestamp):
        return _datetime_to_ms(value.ToDatetime(tzinfo=timezone.utc))
    if isinstance(value, str):
        return _iso_string_to_ms(value)
    return 0


def utc_now_iso() -> str:
    """Current time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
