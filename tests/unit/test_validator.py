"""Tests for FormatValidator class."""

import uuid

from prettyuuid import Format, FormatValidator, ValidationResult
from prettyuuid.alphabets import BASE36, HEX


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_warnings_default_to_empty_list(self) -> None:
        """Test that warnings are initialized."""
        result = ValidationResult(valid=True)

        assert result.warnings == []
        assert result.error is None


class TestFormatValidatorValidate:
    """Tests for FormatValidator.validate()."""

    def test_init_with_format(self) -> None:
        """Test initialization with format."""
        fmt = Format("invoice_", BASE36)
        validator = FormatValidator(fmt)

        assert validator.format is fmt

    def test_valid(self) -> None:
        """Test validating an encoded UUID."""
        fmt = Format("invoice_", BASE36)
        validator = FormatValidator(fmt)

        result = validator.validate("invoice_eoswzolg3bsx0zn8otq1p8oom")

        assert result.valid
        assert result.error is None
        assert result.warnings == []

    def test_valid_for_any_encoded_uuid(self) -> None:
        """Test that freshly encoded UUIDs validate."""
        fmt = Format("u_", HEX)
        validator = FormatValidator(fmt)

        for _ in range(20):
            assert validator.validate(fmt.encode(uuid.uuid4())).valid

    def test_bad_prefix(self) -> None:
        """Test that prefix errors are reported, not raised."""
        validator = FormatValidator(Format("invoice_", BASE36))

        result = validator.validate("user_eoswzolg3bsx0zn8otq1p8oom")

        assert not result.valid
        assert result.error is not None
        assert "does not have expected prefix 'invoice_'" in result.error

    def test_bad_length(self) -> None:
        """Test that length errors are reported."""
        validator = FormatValidator(Format("invoice_", BASE36))

        result = validator.validate("invoice_eosw")

        assert not result.valid
        assert "does not have expected length 33" in result.error

    def test_bad_symbol(self) -> None:
        """Test that symbol errors are reported with position."""
        validator = FormatValidator(Format("invoice_", BASE36))

        result = validator.validate("invoice_eoswzolg3bsx0zn8otq1p8oo#")

        assert not result.valid
        assert "illegal char at position 32" in result.error
        assert result.warnings == []

    def test_case_warning(self) -> None:
        """Test that symbols differing only in case produce a warning."""
        validator = FormatValidator(Format("", HEX))

        result = validator.validate("F81D4FAE7DEC11D0A76500A0C91E6BF6")

        assert not result.valid
        assert len(result.warnings) == 1
        assert "case-sensitive" in result.warnings[0]

    def test_value_out_of_range(self) -> None:
        """Test that values past 128 bits are reported."""
        validator = FormatValidator(Format("", BASE36))

        result = validator.validate("z" * 25)

        assert not result.valid
        assert "does not fit in a UUID" in result.error
