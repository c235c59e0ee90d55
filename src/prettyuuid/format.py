"""Format definition: a prefix plus an alphabet of digits."""

import logging
import uuid
from dataclasses import dataclass, field
from functools import lru_cache

from prettyuuid import codec
from prettyuuid.exceptions import FormatDefinitionError, InvalidAlphabetError

logger = logging.getLogger(__name__)

UUID_BITS = 128
UUID_BYTES = UUID_BITS // 8

# Number of distinct values a UUID can take
_UUID_CAPACITY = 1 << UUID_BITS

TextLike = str | bytes | bytearray


@lru_cache(maxsize=None)
def digit_count(base: int) -> int:
    """Return how many base-`base` digits are needed for any 128-bit value.

    This is ceil(128 / log2(base)), computed as the smallest d with
    base ** d >= 2 ** 128 so that no floating point rounding is involved.

    Args:
        base: Alphabet size (at least 2)

    Returns:
        Number of digits

    Example:
        >>> digit_count(16)
        32
        >>> digit_count(36)
        25
    """
    if base < 2:
        raise ValueError(f"base must be >= 2, got {base}")

    digits = 0
    capacity = 1
    while capacity < _UUID_CAPACITY:
        capacity *= base
        digits += 1
    return digits


def _as_text(value: TextLike) -> str:
    # one byte maps to exactly one symbol
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return value


@dataclass(frozen=True)
class Format:
    """Converts between UUIDs and their pretty string form.

    The alphabet is used as the set of digits in a base-len(alphabet) numeral
    system, most significant digit first, left-padded with alphabet[0]. The
    prefix is prepended to every encoded string and required at the start of
    every decoded one.

    A few common alphabets:
        binary:       01
        hexadecimal:  0123456789abcdef
        base36:       0123456789abcdefghijklmnopqrstuvwxyz

    Example:
        >>> invoices = Format("invoice_", "0123456789abcdefghijklmnopqrstuvwxyz")
        >>> invoices.encode(uuid.UUID("f81d4fae-7dec-11d0-a765-00a0c91e6bf6"))
        'invoice_eoswzolg3bsx0zn8otq1p8oom'

    Raises:
        InvalidAlphabetError: If the alphabet has fewer than two symbols or
            contains a symbol more than once
    """

    prefix: str
    alphabet: str
    _digits: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the alphabet and build the symbol lookup table."""
        prefix = _as_text(self.prefix)
        alphabet = _as_text(self.alphabet)
        if not isinstance(prefix, str) or not isinstance(alphabet, str):
            raise TypeError("prefix and alphabet must be str or bytes")

        if len(alphabet) < 2:
            raise InvalidAlphabetError(InvalidAlphabetError.TOO_SHORT, alphabet)

        digits: dict[str, int] = {}
        for position, symbol in enumerate(alphabet):
            if symbol in digits:
                raise InvalidAlphabetError(
                    InvalidAlphabetError.DUPLICATE_SYMBOL, alphabet
                )
            digits[symbol] = position

        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "_digits", digits)

        logger.debug(
            f"Created format prefix={prefix!r} base={len(alphabet)} "
            f"length={self.length}"
        )

    @property
    def base(self) -> int:
        """Numeral system base (alphabet size)."""
        return len(self.alphabet)

    @property
    def zero(self) -> str:
        """Pad symbol."""
        return self.alphabet[0]

    @property
    def digit_count(self) -> int:
        """Number of digits after the prefix."""
        return digit_count(self.base)

    @property
    def length(self) -> int:
        """Total length of every encoded string."""
        return len(self.prefix) + self.digit_count

    def digit_value(self, symbol: str) -> int | None:
        """Return the digit value of `symbol`, or None if not in the alphabet."""
        return self._digits.get(symbol)

    def encode(self, value: uuid.UUID | bytes | bytearray) -> str:
        """Encode a UUID. See `prettyuuid.codec.encode`."""
        return codec.encode(self, value)

    def decode(self, value: str) -> uuid.UUID:
        """Decode a string. See `prettyuuid.codec.decode`."""
        return codec.decode(self, value)

    def is_valid(self, value: str) -> bool:
        """Return True if `value` decodes with this format."""
        return codec.is_valid(self, value)


def new_format(prefix: TextLike = "", alphabet: TextLike = "") -> Format:
    """Create a Format with the given prefix and alphabet.

    Args:
        prefix: Literal text prepended to every encoded UUID (may be empty)
        alphabet: Digit symbols, at least two, all distinct

    Returns:
        Validated Format

    Raises:
        InvalidAlphabetError: If the alphabet is invalid
    """
    return Format(prefix, alphabet)


def must_format(prefix: TextLike, alphabet: TextLike) -> Format:
    """Like `new_format`, for literal alphabets known to be valid.

    An invalid alphabet here is a programming error, so it raises
    FormatDefinitionError instead of the recoverable InvalidAlphabetError.

    Example:
        >>> INVOICE = must_format("invoice_", "0123456789abcdefghijklmnopqrstuvwxyz")
    """
    try:
        return Format(prefix, alphabet)
    except InvalidAlphabetError as e:
        raise FormatDefinitionError(_as_text(prefix), e.alphabet, e) from e
