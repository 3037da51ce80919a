from chronoid.config import IDConfig
from chronoid.errors import DecodeError
from chronoid.layout import plan
from chronoid.utils.timestamp import format_nanos, from_nanos


class DecodedID:
    __slots__ = ("timestamp_ns", "quantum", "chrono", "random")

    def __init__(self, timestamp_ns, quantum, chrono, random):
        self.timestamp_ns = timestamp_ns
        self.quantum = quantum
        self.chrono = chrono
        self.random = random

    @property
    def timestamp(self):
        """UTC datetime of the quantum start, truncated to microseconds."""
        return from_nanos(self.timestamp_ns)

    def __iter__(self):
        return iter((self.timestamp, self.chrono, self.random))

    def __eq__(self, other):
        if not isinstance(other, DecodedID):
            return NotImplemented
        return ((self.timestamp_ns, self.quantum, self.chrono, self.random)
                == (other.timestamp_ns, other.quantum, other.chrono, other.random))

    def __repr__(self):
        return f"DecodedID({format_nanos(self.timestamp_ns)}, chrono={self.chrono!r}, random={self.random!r})"

    def to_dict(self):
        return {
            "timestamp": format_nanos(self.timestamp_ns),
            "timestamp_ns": self.timestamp_ns,
            "quantum": self.quantum,
            "chrono": self.chrono,
            "random": self.random,
        }


class Decoder:
    """Splits identifiers back into their segments. Holds no mutable state."""

    def __init__(self, config=None):
        self.config = config or IDConfig()
        self.layout = plan(self.config)

    def decode(self, identifier):
        layout = self.layout
        if not isinstance(identifier, str) or len(identifier) != layout.length:
            size = len(identifier) if isinstance(identifier, str) else None
            raise DecodeError(f"bad length: expected {layout.length} characters, got {size}",
                              identifier=identifier)

        chrono_start = layout.timestamp_width
        random_start = chrono_start + layout.chrono_width
        try:
            quantum = layout.alphabet.decode(identifier[:chrono_start])
            layout.alphabet.validate(identifier[chrono_start:], offset=chrono_start)
        except DecodeError as e:
            e.identifier = identifier
            e.context["identifier"] = identifier
            raise
        if quantum > layout.max_quantum:
            raise DecodeError(
                f"bad timestamp: quantum {quantum} is beyond the {self.config.horizon_years}-year horizon "
                f"(max {layout.max_quantum})",
                identifier=identifier,
            )

        return DecodedID(
            timestamp_ns=self.config.start_ns + quantum * layout.quantum_nanos,
            quantum=quantum,
            chrono=identifier[chrono_start:random_start],
            random=identifier[random_start:],
        )

    def chrono_value(self, identifier):
        """Numeric value of the chrono segment."""
        return self.layout.alphabet.decode(self.decode(identifier).chrono)

    def sort_key(self, identifier):
        """Ordering key that is correct even for alphabets not in code point order."""
        return self.layout.alphabet.sort_key(identifier)
