"""Unit tests for Decoder."""

from datetime import timedelta

import pytest

from chronoid.config import IDConfig
from chronoid.decoder import DecodedID, Decoder
from chronoid.errors import DecodeError, InvalidCharacterError
from chronoid.generator import Generator
from chronoid.levels import SECOND, TimestampLevel


class TestDecode:
    """Tests for Decoder.decode."""

    def test_round_trip_default(self, clock, start, start_ns):
        """Decoded timestamp is the instant truncated to the microsecond."""
        clock.advance(123_456_789_123)
        generator = Generator(IDConfig(), clock=clock)
        decoded = generator.decoder().decode(generator.generate())
        assert decoded.timestamp_ns == start_ns + 123_456_789_000
        assert decoded.quantum == 123_456_789
        assert decoded.timestamp == start + timedelta(microseconds=123_456_789)

    @pytest.mark.parametrize("level", list(TimestampLevel))
    def test_round_trip_every_level(self, level, clock, start_ns):
        """Round trip holds at every precision."""
        offset = 987_654_321_987_654_321
        clock.advance(offset)
        config = IDConfig(length=40, timestamp_level=level, max_sortable_rate="1/s")
        generator = Generator(config, clock=clock)
        decoded = generator.decoder().decode(generator.generate())
        quantum = level.nanos
        assert decoded.timestamp_ns == start_ns + offset // quantum * quantum

    def test_segments_verbatim(self, decimal_config, clock):
        """Chrono and random slices are returned as strings."""
        clock.advance(7 * SECOND)
        generator = Generator(decimal_config, clock=clock)
        identifier = generator.generate()
        decoded = Decoder(decimal_config).decode(identifier)
        assert decoded.quantum == 7
        assert decoded.chrono == identifier[10:11] == "0"
        assert decoded.random == identifier[11:]

    def test_unpacks_as_triple(self, decimal_config, clock, start):
        """DecodedID unpacks as (timestamp, chrono, random)."""
        clock.advance(3 * SECOND)
        identifier = Generator(decimal_config, clock=clock).generate()
        timestamp, chrono, rand = Decoder(decimal_config).decode(identifier)
        assert timestamp == start + timedelta(seconds=3)
        assert chrono == "0"
        assert rand == identifier[-3:]

    def test_idempotent(self, hundred_config, clock):
        """Decoding the same string twice gives equal results."""
        decoder = Decoder(hundred_config)
        identifier = Generator(hundred_config, clock=clock).generate()
        first = decoder.decode(identifier)
        second = decoder.decode(identifier)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_chrono_value(self, hundred_config, clock):
        """chrono_value decodes the chrono slice numerically."""
        generator = Generator(hundred_config, clock=clock)
        decoder = Decoder(hundred_config)
        ids = [generator.generate() for _ in range(12)]
        assert decoder.chrono_value(ids[11]) == 11

    def test_decodes_handwritten_identifier(self, decimal_config, start_ns):
        """Any well-formed string decodes, not only generated ones."""
        decoded = Decoder(decimal_config).decode("00000000420123")
        assert isinstance(decoded, DecodedID)
        assert decoded.quantum == 42
        assert decoded.timestamp_ns == start_ns + 42 * SECOND
        assert decoded.chrono == "0"
        assert decoded.random == "123"
        assert decoded.to_dict()["timestamp"] == "2024-01-01T00:00:42.000000000Z"


class TestDecodeErrors:
    """Tests for rejected identifiers."""

    def test_one_short_is_length_error(self, decimal_config):
        """A truncated identifier fails on length, not on characters."""
        with pytest.raises(DecodeError) as exc_info:
            Decoder(decimal_config).decode("0000000042012")
        assert not isinstance(exc_info.value, InvalidCharacterError)
        assert str(exc_info.value).startswith("bad length")

    def test_too_long(self, decimal_config):
        """Extra characters fail on length."""
        with pytest.raises(DecodeError):
            Decoder(decimal_config).decode("000000004201234")

    def test_not_a_string(self, decimal_config):
        """Non-strings fail on length."""
        with pytest.raises(DecodeError):
            Decoder(decimal_config).decode(42)

    def test_bad_character_in_timestamp(self, decimal_config):
        """Foreign characters in the timestamp slice are rejected."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            Decoder(decimal_config).decode("000000a0420123")
        error = exc_info.value
        assert str(error).startswith("bad character")
        assert error.position == 6
        assert error.identifier == "000000a0420123"

    def test_bad_character_in_random(self, decimal_config):
        """Foreign characters in the random slice are rejected."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            Decoder(decimal_config).decode("0000000042012_")
        assert exc_info.value.position == 13
        assert exc_info.value.character == "_"

    def test_wrong_configuration(self, decimal_config):
        """Identifiers from another configuration do not decode."""
        identifier = Generator(IDConfig()).generate()
        with pytest.raises(DecodeError):
            Decoder(decimal_config).decode(identifier)

    def test_timestamp_beyond_horizon(self):
        """Timestamp slices past the horizon are rejected."""
        config = IDConfig(timestamp_level="millisecond", max_sortable_rate="1/s")
        with pytest.raises(DecodeError) as exc_info:
            Decoder(config).decode("z" * 8 + "-" * 24)
        assert not isinstance(exc_info.value, InvalidCharacterError)
        assert str(exc_info.value).startswith("bad timestamp")

    def test_timestamp_at_horizon(self, start_ns):
        """The last quantum of the horizon still decodes and unpacks."""
        config = IDConfig(timestamp_level="millisecond", max_sortable_rate="1/s")
        decoder = Decoder(config)
        layout = decoder.layout
        identifier = layout.alphabet.encode(layout.max_quantum, 8) + "-" * 24
        decoded = decoder.decode(identifier)
        timestamp, chrono, rand = decoded
        assert decoded == decoder.decode(identifier)
        assert decoded.timestamp_ns == start_ns + layout.max_quantum * layout.quantum_nanos
        assert (timestamp.year, timestamp.month, timestamp.day, timestamp.hour) == (2224, 1, 1, 12)
        assert chrono == "-"
        assert rand == "-" * 23
