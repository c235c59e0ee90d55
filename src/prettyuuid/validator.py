"""Encoded UUID validator."""

from dataclasses import dataclass

from prettyuuid.exceptions import BadSymbolError, DecodeError
from prettyuuid.format import Format


@dataclass
class ValidationResult:
    """Encoded UUID validation result."""

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None

    def __post_init__(self) -> None:
        """Initialize warnings list."""
        if self.warnings is None:
            self.warnings = []


class FormatValidator:
    """Validator for strings encoded with a specific format."""

    def __init__(self, format: Format):
        """Initialize validator.

        Args:
            format: Format instance to use
        """
        self.format = format

    def validate(self, value: str) -> ValidationResult:
        """Validate an encoded UUID without raising.

        Args:
            value: Encoded string to validate

        Returns:
            Validation result; `error` holds the decode error message
        """
        try:
            self.format.decode(value)
        except DecodeError as e:
            warnings = []
            if isinstance(e, BadSymbolError) and e.char.swapcase() in self.format.alphabet:
                warnings.append(
                    f"{e.char!r} differs only in case from an alphabet symbol; "
                    f"the alphabet is case-sensitive"
                )
            return ValidationResult(valid=False, error=str(e), warnings=warnings)

        return ValidationResult(valid=True)
