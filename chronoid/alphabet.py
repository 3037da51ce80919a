"""
Alphabet codec.

Converts non-negative integers to and from fixed-width digit strings over an
ordered character set. Digit value ``i`` is the ``i``-th character, so raw
string comparison matches numeric comparison only when the characters are in
ascending code point order (see ``Alphabet.is_ordered``).
"""

import secrets

from chronoid.errors import ConfigError, EncodingOverflowError, InvalidCharacterError


class Alphabet:
    __slots__ = ("chars", "base", "_index")

    def __init__(self, chars):
        if not isinstance(chars, str):
            chars = "".join(chars)
        if len(chars) < 2:
            raise ConfigError("alphabet needs at least 2 characters", field="alphabet")
        if len(set(chars)) != len(chars):
            raise ConfigError("alphabet characters must be distinct", field="alphabet")
        self.chars = chars
        self.base = len(chars)
        self._index = {char: digit for digit, char in enumerate(chars)}

    def __len__(self):
        return self.base

    def __contains__(self, char):
        return char in self._index

    def __eq__(self, other):
        return isinstance(other, Alphabet) and other.chars == self.chars

    def __hash__(self):
        return hash(self.chars)

    def __repr__(self):
        return f"Alphabet({self.chars!r})"

    @property
    def zero(self):
        return self.chars[0]

    @property
    def is_ordered(self):
        """True when raw string comparison agrees with digit order."""
        return all(a < b for a, b in zip(self.chars, self.chars[1:]))

    def width_for(self, max_value):
        """Minimum digit count (at least 1) able to represent ``max_value``."""
        width = 1
        limit = self.base
        while max_value >= limit:
            limit *= self.base
            width += 1
        return width

    def encode(self, value, width):
        """Encode ``value`` most-significant digit first, zero-padded to ``width``."""
        if value < 0:
            raise ValueError(f"cannot encode negative value {value}")
        if value >= self.base ** width:
            raise EncodingOverflowError(
                f"value {value} does not fit in {width} base-{self.base} digits",
                value=value,
                width=width,
            )
        digits = []
        for _ in range(width):
            value, remainder = divmod(value, self.base)
            digits.append(self.chars[remainder])
        return "".join(reversed(digits))

    def decode(self, text, offset=0):
        """Inverse of ``encode``. ``offset`` shifts reported error positions."""
        value = 0
        for position, char in enumerate(text):
            digit = self._index.get(char)
            if digit is None:
                raise InvalidCharacterError(
                    f"bad character {char!r} at position {position + offset}",
                    character=char,
                    position=position + offset,
                )
            value = value * self.base + digit
        return value

    def validate(self, text, offset=0):
        for position, char in enumerate(text):
            if char not in self._index:
                raise InvalidCharacterError(
                    f"bad character {char!r} at position {position + offset}",
                    character=char,
                    position=position + offset,
                )

    def random(self, width):
        """``width`` characters drawn independently from a CSPRNG."""
        return "".join(secrets.choice(self.chars) for _ in range(width))

    def sort_key(self, text):
        """Digit values of ``text``; orders identifiers correctly for any alphabet."""
        self.validate(text)
        return tuple(self._index[char] for char in text)
