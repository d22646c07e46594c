from datetime import datetime, timedelta, timezone

import pytest

from compositeid.utils.timestamps import add_milliseconds, milliseconds_between, to_milliseconds


def test_milliseconds_between_datetimes():
    start = datetime(2024, 1, 1)
    assert milliseconds_between(start, start + timedelta(hours=2)) == 7_200_000
    assert milliseconds_between(start, start + timedelta(microseconds=1500)) == 1


def test_milliseconds_between_floors_negative_deltas():
    start = datetime(2024, 1, 1)
    assert milliseconds_between(start, start - timedelta(microseconds=1)) == -1
    assert milliseconds_between(1000, 999) == -1


def test_milliseconds_between_epoch_ms():
    assert milliseconds_between(1_000, 8_201_000) == 8_200_000


def test_mixed_instant_kinds_rejected():
    with pytest.raises(TypeError):
        milliseconds_between(datetime(2024, 1, 1), 0)


def test_naive_and_aware_rejected():
    with pytest.raises(TypeError):
        milliseconds_between(datetime(2024, 1, 1), datetime(2024, 1, 2, tzinfo=timezone.utc))


@pytest.mark.parametrize("value", ["2024-01-01", 1.5, None, True])
def test_unsupported_instant(value):
    with pytest.raises(TypeError):
        to_milliseconds(value)


def test_add_milliseconds_keeps_instant_kind():
    start = datetime(2024, 1, 1)
    assert add_milliseconds(start, 3_600_000) == datetime(2024, 1, 1, 1)
    assert add_milliseconds(1_000, 3_600_000) == 3_601_000


def test_to_milliseconds():
    assert to_milliseconds(datetime(1970, 1, 1, 0, 0, 1)) == 1_000
    assert to_milliseconds(datetime(1970, 1, 1, 1, tzinfo=timezone(timedelta(hours=1)))) == 0
    assert to_milliseconds(42) == 42


def test_milliseconds_between_agrees_with_to_milliseconds():
    start = datetime(2024, 1, 1)
    end = start + timedelta(hours=3, milliseconds=7)
    assert milliseconds_between(start, end) == to_milliseconds(end) - to_milliseconds(start)
    assert milliseconds_between(to_milliseconds(start), to_milliseconds(end)) == 10_800_007
