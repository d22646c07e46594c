"""
Instant/duration arithmetic used by the identifier types.

An instant is either a datetime or an int holding epoch milliseconds; every
function hands back the same kind of instant it was given.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Union

Instant = Union[datetime, int]

_ONE_MS = timedelta(milliseconds=1)
_EPOCH = datetime(1970, 1, 1)


def _check_instant(instant: object) -> None:
    if isinstance(instant, bool) or not isinstance(instant, (datetime, int)):
        raise TypeError(f"unsupported instant type: {type(instant).__name__}")


def to_milliseconds(instant: Instant) -> int:
    _check_instant(instant)
    if isinstance(instant, datetime):
        # naive datetimes are taken as UTC wall-clock
        epoch = _EPOCH if instant.tzinfo is None else _EPOCH.replace(tzinfo=timezone.utc)
        return (instant - epoch) // _ONE_MS
    return int(instant)


def milliseconds_between(start: Instant, end: Instant) -> int:
    """
    returns (end - start) in whole milliseconds, floored.
    """
    _check_instant(start)
    _check_instant(end)
    if isinstance(start, datetime) and isinstance(end, datetime):
        return (end - start) // _ONE_MS
    if isinstance(start, datetime) or isinstance(end, datetime):
        raise TypeError("cannot mix datetime and epoch-millisecond instants")
    return to_milliseconds(end) - to_milliseconds(start)


def add_milliseconds(instant: Instant, ms: int) -> Instant:
    _check_instant(instant)
    if isinstance(instant, datetime):
        return instant + timedelta(milliseconds=ms)
    return int(instant) + int(ms)
