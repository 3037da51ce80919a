"""
Time-ordered identifier generator.

Each identifier is ``timestamp | chrono | random``:

    - timestamp: quanta elapsed since the configured start, fixed width
    - chrono: position of this identifier within its quantum (0, 1, 2, ...)
    - random: CSPRNG characters from the alphabet

Within one instance, identifiers from the same quantum carry strictly
increasing chrono values, so the fixed-width timestamp+chrono prefix orders
them by call order. Once a quantum has handed out its declared capacity,
further calls raise RateExceededError until the next quantum begins.

Thread safety: a single lock guards the (last_quantum, counter) pair. The
clock is read under the lock so quanta are observed in call order; encoding
and the random fill run outside it on captured values.
"""

import threading

from chronoid.config import IDConfig
from chronoid.decoder import Decoder
from chronoid.errors import ConfigError, RateExceededError
from chronoid.internal.logging import get_logger
from chronoid.layout import plan
from chronoid.utils.timestamp import format_nanos, now_nanos

_NO_QUANTUM = -1


class Generator:
    """Thread-safe generator of sortable identifiers for one configuration.

    Attributes:
        config: The IDConfig the identifiers are produced under.
        layout: Cached segment widths for ``config``.
        generated: Identifiers handed out so far.
        rejected: Calls refused with RateExceededError.
    """

    def __init__(self, config=None, clock=None):
        """Plans the layout and prepares an empty quantum state.

        Args:
            config: IDConfig to use; defaults to ``IDConfig()``.
            clock: Callable returning nanoseconds since the Unix epoch.

        Raises:
            ConfigError: If the configuration cannot produce a layout.
        """
        self.config = config or IDConfig()
        self.layout = plan(self.config)
        self._clock = clock or now_nanos
        self._lock = threading.Lock()
        self._last_quantum = _NO_QUANTUM
        self._counter = 0
        self._log = get_logger()
        self.generated = 0
        self.rejected = 0
        self._log.debug("generator created", length=self.config.length,
                        timestamp_level=self.config.timestamp_level.value,
                        max_sortable_rate=self.config.max_sortable_rate.value)

    def _quantize(self, now_ns):
        elapsed = now_ns - self.config.start_ns
        if elapsed < 0:
            raise ConfigError(
                f"clock {format_nanos(now_ns)} precedes timestamp start "
                f"{format_nanos(self.config.start_ns)}",
                field="timestamp_start",
            )
        quantum = elapsed // self.layout.quantum_nanos
        if quantum > self.layout.max_quantum:
            raise ConfigError(
                f"clock {format_nanos(now_ns)} is beyond the {self.config.horizon_years}-year horizon",
                field="horizon_years",
            )
        return quantum

    def generate(self):
        """Generates one identifier.

        Returns:
            A string of exactly ``config.length`` alphabet characters.

        Raises:
            RateExceededError: If the current quantum's capacity is used up.
            ConfigError: If the clock is before the start or past the horizon.
        """
        layout = self.layout
        with self._lock:
            quantum = self._quantize(self._clock())
            if quantum != self._last_quantum:
                if quantum < self._last_quantum:
                    self._log.warn("clock moved backwards", quantum=quantum,
                                   last_quantum=self._last_quantum)
                self._last_quantum = quantum
                self._counter = 0

            exhausted = self._counter > layout.max_chrono
            if exhausted:
                self.rejected += 1
            else:
                chrono = self._counter
                self._counter += 1
                self.generated += 1

        if exhausted:
            self._log.debug("rate exceeded", quantum=quantum, capacity=layout.capacity)
            raise RateExceededError(
                f"rate exceeded: {layout.capacity} identifiers already issued in quantum {quantum}",
                quantum=quantum,
                capacity=layout.capacity,
            )

        alphabet = layout.alphabet
        return (alphabet.encode(quantum, layout.timestamp_width)
                + alphabet.encode(chrono, layout.chrono_width)
                + alphabet.random(layout.random_width))

    def decoder(self):
        """Decoder for identifiers produced under this generator's configuration."""
        return Decoder(self.config)

    def describe(self):
        """Configuration, layout and counters for debugging."""
        return {
            "config": self.config.to_dict(),
            "layout": self.layout.to_dict(),
            "generated": self.generated,
            "rejected": self.rejected,
        }


def new(config=None, clock=None):
    """Builds a Generator, raising ConfigError if ``config`` is infeasible."""
    return Generator(config, clock=clock)


_default = None
_default_lock = threading.Lock()


def get_default_generator():
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Generator()
    return _default


def generate_id():
    """Generate an identifier with the default configuration."""
    return get_default_generator().generate()


def decode_id(identifier):
    """Decode an identifier produced with the default configuration."""
    return get_default_generator().decoder().decode(identifier)
