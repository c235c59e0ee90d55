"""Integration tests for the configuration -> registry -> codec workflow."""

import uuid
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from prettyuuid import Config, Format, FormatValidator, must_format
from prettyuuid.alphabets import BASE36, BASE58


class TestConfiguredWorkflow:
    """End-to-end use of formats loaded from prettyuuid.toml."""

    def test_invoice_workflow(self, tmp_path: Path) -> None:
        """Test loading, encoding, validating and decoding invoice ids."""
        (tmp_path / "prettyuuid.toml").write_text(
            "default_format = \"invoice\"\n"
            "\n"
            "[formats.invoice]\n"
            "prefix = \"invoice_\"\n"
            "alphabet = \"0123456789abcdefghijklmnopqrstuvwxyz\"\n"
        )

        config = Config.find_and_load(tmp_path)
        registry = config.build_registry()
        invoice = config.get_default_format()

        invoice_id = uuid.UUID("f81d4fae-7dec-11d0-a765-00a0c91e6bf6")
        encoded = registry.encode("invoice", invoice_id)

        assert encoded == "invoice_eoswzolg3bsx0zn8otq1p8oom"
        assert FormatValidator(invoice).validate(encoded).valid
        assert registry.decode("invoice", encoded) == invoice_id

    def test_formats_do_not_accept_each_other(self) -> None:
        """Test that ids from one format are rejected by another."""
        users = must_format("user_", BASE58)
        orders = must_format("order_", BASE58)

        user_id = users.encode(uuid.uuid4())

        assert users.is_valid(user_id)
        assert not orders.is_valid(user_id)
        result = FormatValidator(orders).validate(user_id)
        assert "expected prefix 'order_'" in result.error


class TestConcurrentUse:
    """Formats are shared across threads without synchronization."""

    def test_shared_format_across_threads(self) -> None:
        """Test concurrent encode/decode with one shared format."""
        fmt = Format("id_", BASE36)
        values = [uuid.uuid4() for _ in range(500)]

        def round_trip(value: uuid.UUID) -> bool:
            return fmt.decode(fmt.encode(value)) == value

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(round_trip, values))

        assert all(results)
        assert len({fmt.encode(v) for v in values}) == len(values)
