import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from chronoid.errors import ConfigError
from chronoid.internal.logging import LogLevel, StructuredLogger
from chronoid.levels import RateLevel, TimestampLevel
from chronoid.utils.timestamp import parse_timestamp, to_nanos

_DEFAULT_CONFIG = Path("chronoid.json")

# URL-safe characters in ascending code point order, so identifiers sort as plain strings.
DEFAULT_ALPHABET = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"
DEFAULT_LENGTH = 32
DEFAULT_TIMESTAMP_START = datetime(2024, 1, 1, tzinfo=timezone.utc)
DEFAULT_TIMESTAMP_LEVEL = TimestampLevel.MICROSECOND
DEFAULT_MAX_SORTABLE_RATE = RateLevel.HUNDRED_PER_MICROSECOND
HORIZON_YEARS = 200


@dataclass(frozen=True)
class IDConfig:
    alphabet: str = DEFAULT_ALPHABET
    length: int = DEFAULT_LENGTH
    timestamp_start: datetime = DEFAULT_TIMESTAMP_START
    timestamp_level: TimestampLevel = DEFAULT_TIMESTAMP_LEVEL
    max_sortable_rate: RateLevel = DEFAULT_MAX_SORTABLE_RATE
    horizon_years: int = HORIZON_YEARS
    start_ns: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        start = self.timestamp_start
        if isinstance(start, str):
            try:
                start = parse_timestamp(start)
            except ValueError as e:
                raise ConfigError(f"invalid timestamp_start {start!r}", field="timestamp_start", cause=e)
        elif start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        object.__setattr__(self, "timestamp_start", start)
        object.__setattr__(self, "timestamp_level", TimestampLevel.parse(self.timestamp_level))
        object.__setattr__(self, "max_sortable_rate", RateLevel.parse(self.max_sortable_rate))
        if not isinstance(self.alphabet, str):
            object.__setattr__(self, "alphabet", "".join(self.alphabet))
        object.__setattr__(self, "start_ns", to_nanos(start))

    def to_dict(self):
        return {
            "alphabet": self.alphabet,
            "length": self.length,
            "timestamp_start": self.timestamp_start.isoformat(),
            "timestamp_level": self.timestamp_level.value,
            "max_sortable_rate": self.max_sortable_rate.value,
            "horizon_years": self.horizon_years,
        }


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("ids", "logging")

    def __init__(self, ids=None, logging=None):
        self.ids = ids or IDConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        try:
            ids = IDConfig(**d.get("ids", {}))
        except TypeError as e:
            raise ConfigError(f"invalid ids section: {e}", field="ids", cause=e)
        try:
            logging = LoggingConfig(**d.get("logging", {}))
        except TypeError as e:
            raise ConfigError(f"invalid logging section: {e}", field="logging", cause=e)
        LogLevel.parse(logging.level)
        return cls(ids, logging)

    def apply(self):
        """Configure the process logger from the logging section."""
        StructuredLogger.configure(self.logging.level)


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
