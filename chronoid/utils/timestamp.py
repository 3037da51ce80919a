"""Nanosecond timestamp utilities."""

import time
from datetime import datetime, timezone

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_nanos():
    """Current time in nanoseconds since Unix epoch."""
    return time.time_ns()


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // 1_000


def to_nanos(dt):
    """Convert a datetime to nanoseconds since Unix epoch. Naive values are UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - UNIX_EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1_000


def from_nanos(epoch_ns):
    """UTC datetime for a nanosecond timestamp, truncated to microseconds."""
    seconds, remainder = divmod(epoch_ns, 1_000_000_000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=remainder // 1_000)


def parse_timestamp(value):
    """Parse an ISO 8601 string (``Z`` suffix allowed) into an aware datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = from_nanos(epoch_us * 1_000)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


def format_nanos(epoch_ns):
    """Format timestamp as ISO 8601 with nanoseconds; raw nanoseconds outside datetime's range."""
    try:
        dt = from_nanos(epoch_ns)
    except (ValueError, OverflowError, OSError):
        return f"{epoch_ns}ns"
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{epoch_ns % 1_000_000_000:09d}Z"
