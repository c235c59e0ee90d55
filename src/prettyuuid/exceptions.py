"""Custom exceptions with helpful error messages."""


class PrettyUUIDError(Exception):
    """Base exception for recoverable prettyuuid errors."""

    pass


class InvalidAlphabetError(PrettyUUIDError, ValueError):
    """Alphabet cannot be used as a set of digits."""

    TOO_SHORT = "too short"
    DUPLICATE_SYMBOL = "duplicate symbol"

    def __init__(self, reason: str, alphabet: str):
        self.reason = reason
        self.alphabet = alphabet

        if reason == self.TOO_SHORT:
            message = f"alphabet must have len >= 2: {alphabet!r}"
        else:
            message = f"alphabet must not contain duplicate chars: {alphabet!r}"
        super().__init__(message)


class DecodeError(PrettyUUIDError, ValueError):
    """String is not a valid encoding for the format it was parsed with."""

    pass


class BadPrefixError(DecodeError):
    """String does not start with the format prefix."""

    def __init__(self, expected: str, got: str):
        self.expected = expected
        self.got = got
        super().__init__(f"{got!r} does not have expected prefix {expected!r}")


class BadLengthError(DecodeError):
    """String has the right prefix but the wrong total length."""

    def __init__(self, expected: int, got: int, value: str):
        self.expected = expected
        self.got = got
        self.value = value
        super().__init__(f"{value!r} does not have expected length {expected}")


class BadSymbolError(DecodeError):
    """String contains a character outside the alphabet."""

    def __init__(self, position: int, char: str, value: str):
        self.position = position
        self.char = char
        self.value = value
        super().__init__(f"{value!r} contains illegal char at position {position}")


class BadValueError(DecodeError):
    """String is well formed but encodes a number larger than 128 bits."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"{value!r} encodes a value that does not fit in a UUID")


class InvariantViolationError(RuntimeError):
    """Decoded value does not fit in 128 bits.

    Only reachable if the digit count for a format is computed wrongly, so it
    signals a bug in this package rather than bad input.
    """

    pass


class FormatDefinitionError(RuntimeError):
    """A literal format definition is invalid."""

    def __init__(self, prefix: str, alphabet: str, cause: InvalidAlphabetError):
        super().__init__(
            f"Format({prefix!r}, {alphabet!r}) is invalid: {cause}\n\n"
            f"Suggestions:\n"
            f"1. Use at least two symbols in the alphabet\n"
            f"2. Remove repeated symbols from the alphabet\n"
            f"3. Use a built-in alphabet from prettyuuid.alphabets"
        )
