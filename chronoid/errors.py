"""Errors raised while planning, generating and decoding identifiers."""

from chronoid.utils.timestamp import format_timestamp


class ChronoIDError(Exception):
    """Base error with timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class ConfigError(ChronoIDError, ValueError):
    """Infeasible configuration (layout too short, degenerate alphabet, time outside horizon)."""

    def __init__(self, message, field=None, **kwargs):
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        super().__init__(message, context=context, **kwargs)
        self.field = field


class RateExceededError(ChronoIDError):
    """Per-quantum chrono budget exhausted. Retry once the quantum rolls over."""

    def __init__(self, message, quantum=None, capacity=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(quantum=quantum, capacity=capacity)
        super().__init__(message, context=context, **kwargs)
        self.quantum = quantum
        self.capacity = capacity


class EncodingOverflowError(ChronoIDError, OverflowError):
    """Value does not fit in the requested number of digits."""

    def __init__(self, message, value=None, width=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(value=value, width=width)
        super().__init__(message, context=context, **kwargs)
        self.value = value
        self.width = width


class DecodeError(ChronoIDError, ValueError):
    """Identifier does not match the configuration used to decode it."""

    def __init__(self, message, identifier=None, **kwargs):
        context = kwargs.pop("context", {})
        if identifier is not None:
            context["identifier"] = identifier
        super().__init__(message, context=context, **kwargs)
        self.identifier = identifier


class InvalidCharacterError(DecodeError):
    """Character outside the alphabet."""

    def __init__(self, message, character=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(character=character, position=position)
        super().__init__(message, context=context, **kwargs)
        self.character = character
        self.position = position
