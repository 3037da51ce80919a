"""
Layout planning.

Derives the width of each identifier segment from a configuration:

    | timestamp_width | chrono_width | random_width |
    |  quantum ticks  | per-quantum  |   entropy    |
    |  since start    |   counter    |              |

The timestamp segment is sized to hold every quantum up to the configured
horizon, the chrono segment to hold the largest per-quantum sequence value,
and whatever is left of the total length is random.
"""

from functools import lru_cache

from chronoid.alphabet import Alphabet
from chronoid.config import IDConfig
from chronoid.errors import ConfigError
from chronoid.internal.logging import get_logger
from chronoid.levels import YEAR


class Layout:
    __slots__ = (
        "alphabet",
        "timestamp_width",
        "chrono_width",
        "random_width",
        "quantum_nanos",
        "max_quantum",
        "capacity",
    )

    def __init__(self, alphabet, timestamp_width, chrono_width, random_width,
                 quantum_nanos, max_quantum, capacity):
        self.alphabet = alphabet
        self.timestamp_width = timestamp_width
        self.chrono_width = chrono_width
        self.random_width = random_width
        self.quantum_nanos = quantum_nanos
        self.max_quantum = max_quantum
        self.capacity = capacity

    @property
    def length(self):
        return self.timestamp_width + self.chrono_width + self.random_width

    @property
    def max_chrono(self):
        return self.capacity - 1

    def to_dict(self):
        return {
            "timestamp_width": self.timestamp_width,
            "chrono_width": self.chrono_width,
            "random_width": self.random_width,
            "length": self.length,
            "base": self.alphabet.base,
            "ordered_alphabet": self.alphabet.is_ordered,
            "quantum_nanos": self.quantum_nanos,
            "max_quantum": self.max_quantum,
            "capacity": self.capacity,
        }

    def __repr__(self):
        return (f"Layout(timestamp={self.timestamp_width}, chrono={self.chrono_width}, "
                f"random={self.random_width})")


PLAN_CACHE_SIZE = 128


def plan(config=None):
    """Validate ``config`` and compute its segment widths. Cached per configuration."""
    return _plan(config or IDConfig())


@lru_cache(maxsize=PLAN_CACHE_SIZE)
def _plan(config):
    if config.length <= 0:
        raise ConfigError(f"length must be positive, got {config.length}", field="length")
    if config.horizon_years <= 0:
        raise ConfigError(f"horizon_years must be positive, got {config.horizon_years}",
                          field="horizon_years")
    alphabet = Alphabet(config.alphabet)

    quantum_nanos = config.timestamp_level.nanos
    max_quantum = config.horizon_years * YEAR // quantum_nanos
    capacity = config.max_sortable_rate.capacity(config.timestamp_level)

    timestamp_width = alphabet.width_for(max_quantum)
    chrono_width = alphabet.width_for(capacity - 1)
    random_width = config.length - timestamp_width - chrono_width
    if random_width < 0:
        raise ConfigError(
            f"layout too short: length {config.length} < timestamp {timestamp_width} + chrono {chrono_width}",
            field="length",
        )

    layout = Layout(alphabet, timestamp_width, chrono_width, random_width,
                    quantum_nanos, max_quantum, capacity)
    log = get_logger()
    log.debug("layout planned", timestamp_width=timestamp_width, chrono_width=chrono_width,
              random_width=random_width, capacity=capacity, max_quantum=max_quantum)
    if not alphabet.is_ordered:
        log.warn("alphabet is not in ascending order, compare identifiers with sort_key",
                 alphabet=alphabet.chars)
    return layout
