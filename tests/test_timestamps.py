from datetime import datetime, timezone

import pytest
from google.api_core.datetime_helpers import DatetimeWithNanoseconds
from google.protobuf.timestamp_pb2 import Timestamp

from interview_feedback.timestamps import to_timestamp_ms, utc_now_iso

INSTANT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
INSTANT_MS = 1714564800000


def _proto(dt: datetime) -> Timestamp:
    ts = Timestamp()
    ts.FromDatetime(dt)
    return ts


@pytest.mark.parametrize(
    "value",
    [
        INSTANT,
        INSTANT.replace(tzinfo=None),
        DatetimeWithNanoseconds(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        _proto(INSTANT),
        "2024-05-01T12:00:00Z",
        "2024-05-01T12:00:00.000Z",
        "2024-05-01T14:00:00+02:00",
    ],
)
def test_same_instant_normalizes_identically(value):
    assert to_timestamp_ms(value) == INSTANT_MS


@pytest.mark.parametrize("value", [None, "", "not-a-date", "2024-13-45", 1714564800000, {"seconds": 1}])
def test_absent_or_unparseable_is_zero(value):
    assert to_timestamp_ms(value) == 0


def test_utc_now_iso_round_trips():
    stamp = utc_now_iso()
    assert stamp.endswith("Z")
    assert to_timestamp_ms(stamp) > 0
