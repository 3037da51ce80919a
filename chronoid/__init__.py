from chronoid.alphabet import Alphabet
from chronoid.config import (
    DEFAULT_ALPHABET,
    HORIZON_YEARS,
    Config,
    IDConfig,
    LoggingConfig,
    load_config,
)
from chronoid.decoder import DecodedID, Decoder
from chronoid.errors import (
    ChronoIDError,
    ConfigError,
    DecodeError,
    EncodingOverflowError,
    InvalidCharacterError,
    RateExceededError,
)
from chronoid.generator import Generator, decode_id, generate_id, new
from chronoid.layout import Layout, plan
from chronoid.levels import RateLevel, TimestampLevel

__all__ = [
    "Alphabet",
    "DEFAULT_ALPHABET",
    "HORIZON_YEARS",
    "Config",
    "IDConfig",
    "LoggingConfig",
    "load_config",
    "DecodedID",
    "Decoder",
    "ChronoIDError",
    "ConfigError",
    "DecodeError",
    "EncodingOverflowError",
    "InvalidCharacterError",
    "RateExceededError",
    "Generator",
    "decode_id",
    "generate_id",
    "new",
    "Layout",
    "plan",
    "RateLevel",
    "TimestampLevel",
]
