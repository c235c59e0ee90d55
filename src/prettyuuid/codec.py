"""Encoding and decoding of UUIDs with a Format."""

import logging
import uuid
from typing import TYPE_CHECKING

from prettyuuid.exceptions import (
    BadLengthError,
    BadPrefixError,
    BadSymbolError,
    BadValueError,
    DecodeError,
    InvariantViolationError,
)

if TYPE_CHECKING:
    from prettyuuid.format import Format

logger = logging.getLogger(__name__)

_UUID_BYTES = 16


def _to_int(value: uuid.UUID | bytes | bytearray) -> int:
    """Interpret a UUID (or its 16 raw bytes) as a big-endian integer."""
    if isinstance(value, uuid.UUID):
        return value.int
    if isinstance(value, (bytes, bytearray)):
        if len(value) != _UUID_BYTES:
            raise ValueError(
                f"UUID must be exactly {_UUID_BYTES} bytes, got {len(value)}"
            )
        return int.from_bytes(value, "big")
    raise TypeError(f"Expected uuid.UUID or bytes, got {type(value).__name__}")


def encode(format: "Format", value: uuid.UUID | bytes | bytearray) -> str:
    """Encode a UUID as `<prefix><digits>`.

    Digits are written most significant first and left-padded with the
    alphabet's zero symbol, so every output of a format has the same length.

    Args:
        format: Format to encode with
        value: UUID, or its 16 raw big-endian bytes

    Returns:
        Encoded string

    Example:
        >>> hex_format = Format("", "0123456789abcdef")
        >>> encode(hex_format, uuid.UUID("f81d4fae-7dec-11d0-a765-00a0c91e6bf6"))
        'f81d4fae7dec11d0a76500a0c91e6bf6'
    """
    number = _to_int(value)
    alphabet = format.alphabet
    base = len(alphabet)

    # Baseline of zero digits doubles as the left padding
    digits = [alphabet[0]] * format.digit_count
    position = len(digits) - 1
    while number:
        if position < 0:
            raise InvariantViolationError(
                f"prettyuuid invariant failure: {format.digit_count} digits "
                f"cannot hold {value!r} in base {base}"
            )
        number, remainder = divmod(number, base)
        digits[position] = alphabet[remainder]
        position -= 1

    return format.prefix + "".join(digits)


def decode(format: "Format", value: str) -> uuid.UUID:
    """Decode a string produced by `encode` back into a UUID.

    Checks run in a fixed order: prefix, then length, then symbols. A string
    that is wrong in several ways reports the first of these.

    Args:
        format: Format to decode with
        value: Encoded string

    Returns:
        Decoded UUID

    Raises:
        BadPrefixError: If value does not start with the format prefix
        BadLengthError: If value is not exactly format.length characters
        BadSymbolError: If a digit is not in the alphabet (position is the
            index in the full string, prefix included)
        BadValueError: If the digits spell a number of 2 ** 128 or more
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")

    prefix = format.prefix
    if not value.startswith(prefix):
        logger.debug(f"Rejected {value!r}: missing prefix {prefix!r}")
        raise BadPrefixError(prefix, value)

    if len(value) != format.length:
        logger.debug(f"Rejected {value!r}: length {len(value)} != {format.length}")
        raise BadLengthError(format.length, len(value), value)

    base = format.base
    number = 0
    for position in range(len(prefix), len(value)):
        digit = format.digit_value(value[position])
        if digit is None:
            logger.debug(f"Rejected {value!r}: illegal char at position {position}")
            raise BadSymbolError(position, value[position], value)
        number = number * base + digit

    # Bases that are not powers of two can spell numbers past 2 ** 128
    if number >> (_UUID_BYTES * 8):
        logger.debug(f"Rejected {value!r}: value exceeds 128 bits")
        raise BadValueError(value)

    try:
        raw = number.to_bytes(_UUID_BYTES, "big")
    except OverflowError as e:
        raise InvariantViolationError(
            f"prettyuuid invariant failure: {value!r} does not fit in "
            f"{_UUID_BYTES} bytes"
        ) from e

    return uuid.UUID(bytes=raw)


def is_valid(format: "Format", value: str) -> bool:
    """Return True if `value` decodes with `format`."""
    try:
        decode(format, value)
    except DecodeError:
        return False
    return True
