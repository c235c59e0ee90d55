"""
prettyuuid - Human-friendly UUID formats

Encodes 128-bit UUIDs as a literal prefix followed by fixed-width digits
drawn from a custom alphabet (e.g. invoice_eoswzolg3bsx0zn8otq1p8oom), and
decodes them back.
"""

from prettyuuid.codec import decode, encode
from prettyuuid.config import Config, FormatConfig
from prettyuuid.exceptions import (
    BadLengthError,
    BadPrefixError,
    BadSymbolError,
    BadValueError,
    DecodeError,
    FormatDefinitionError,
    InvalidAlphabetError,
    InvariantViolationError,
    PrettyUUIDError,
)
from prettyuuid.format import Format, digit_count, must_format, new_format
from prettyuuid.registry import FormatRegistry
from prettyuuid.validator import FormatValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "BadLengthError",
    "BadPrefixError",
    "BadSymbolError",
    "BadValueError",
    "Config",
    "DecodeError",
    "Format",
    "FormatConfig",
    "FormatDefinitionError",
    "FormatRegistry",
    "FormatValidator",
    "InvalidAlphabetError",
    "InvariantViolationError",
    "PrettyUUIDError",
    "ValidationResult",
    "decode",
    "digit_count",
    "encode",
    "must_format",
    "new_format",
]
