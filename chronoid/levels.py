"""Timestamp precision and sortable-rate levels."""

from enum import Enum

from chronoid.errors import ConfigError

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
# Mean Gregorian year (365.2425 days); a month is a twelfth of it.
YEAR = 31_556_952 * SECOND
MONTH = YEAR // 12


def _parse(enum_cls, value, field):
    if isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if value == member.value or str(value).upper() == member.name:
            return member
    choices = ", ".join(member.value for member in enum_cls)
    raise ConfigError(f"unknown {field} {value!r}, expected one of: {choices}", field=field)


class TimestampLevel(Enum):
    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    @property
    def nanos(self):
        """Quantum duration in nanoseconds."""
        return _QUANTUM_NANOS[self]

    @classmethod
    def parse(cls, value):
        return _parse(cls, value, "timestamp_level")


_QUANTUM_NANOS = {
    TimestampLevel.NANOSECOND: NANOSECOND,
    TimestampLevel.MICROSECOND: MICROSECOND,
    TimestampLevel.MILLISECOND: MILLISECOND,
    TimestampLevel.SECOND: SECOND,
    TimestampLevel.MINUTE: MINUTE,
    TimestampLevel.HOUR: HOUR,
    TimestampLevel.DAY: DAY,
    TimestampLevel.MONTH: MONTH,
    TimestampLevel.YEAR: YEAR,
}


class RateLevel(Enum):
    TEN_PER_NANOSECOND = "10/ns"
    HUNDRED_PER_MICROSECOND = "100/us"
    ONE_PER_MICROSECOND = "1/us"
    TEN_PER_MILLISECOND = "10/ms"
    HUNDRED_PER_SECOND = "100/s"
    ONE_PER_SECOND = "1/s"

    @property
    def count(self):
        return _RATES[self][0]

    @property
    def per_nanos(self):
        return _RATES[self][1]

    def capacity(self, level):
        """Identifiers per quantum of ``level``, rounded up, never below 1."""
        quantum = TimestampLevel.parse(level).nanos
        return max(1, -(-self.count * quantum // self.per_nanos))

    @classmethod
    def parse(cls, value):
        return _parse(cls, value, "max_sortable_rate")


_RATES = {
    RateLevel.TEN_PER_NANOSECOND: (10, NANOSECOND),
    RateLevel.HUNDRED_PER_MICROSECOND: (100, MICROSECOND),
    RateLevel.ONE_PER_MICROSECOND: (1, MICROSECOND),
    RateLevel.TEN_PER_MILLISECOND: (10, MILLISECOND),
    RateLevel.HUNDRED_PER_SECOND: (100, SECOND),
    RateLevel.ONE_PER_SECOND: (1, SECOND),
}
