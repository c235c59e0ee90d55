"""Named format registry."""

import logging
import uuid
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prettyuuid.config import Config

from prettyuuid.alphabets import BUILTIN_ALPHABETS
from prettyuuid.format import Format

logger = logging.getLogger(__name__)


class FormatRegistry:
    """Registry of formats by name.

    Lets an application declare its identifier formats once (usually from
    configuration) and refer to them by name afterwards.

    Example:
        >>> registry = FormatRegistry()
        >>> registry.register("invoice", FormatRegistry.load("base36", prefix="invoice_"))
        >>> registry.encode("invoice", some_uuid)
        'invoice_...'
    """

    BUILTIN_ALPHABETS: dict[str, str] = BUILTIN_ALPHABETS

    def __init__(self) -> None:
        """Initialize registry."""
        self.formats: dict[str, Format] = {}

    @classmethod
    def load(cls, alphabet_name: str, prefix: str = "") -> Format:
        """Build a format from a built-in alphabet.

        Args:
            alphabet_name: Name of alphabet ('hex', 'base36', 'base62', ...)
            prefix: Optional prefix

        Returns:
            Format instance

        Raises:
            ValueError: If alphabet name is not recognized
        """
        if alphabet_name not in cls.BUILTIN_ALPHABETS:
            raise ValueError(
                f"Unknown alphabet: {alphabet_name}. "
                f"Available: {', '.join(cls.BUILTIN_ALPHABETS.keys())}"
            )

        return Format(prefix, cls.BUILTIN_ALPHABETS[alphabet_name])

    @classmethod
    def from_config(cls, config: "Config") -> "FormatRegistry":
        """Create a registry holding every format in `config`.

        Raises:
            InvalidAlphabetError: If a configured alphabet is invalid
        """
        registry = cls()
        for name, format_config in config.formats.items():
            registry.register(name, format_config.to_format())
        logger.info(f"Registered {len(registry)} formats from configuration")
        return registry

    def register(self, name: str, format: Format) -> None:
        """Register a format under `name`, replacing any previous one.

        Args:
            name: Format name
            format: Format instance
        """
        previous = self.formats.get(name)
        if previous is not None and previous != format:
            logger.warning(f"Replacing format '{name}': {previous!r} -> {format!r}")
        self.formats[name] = format

    def get(self, name: str) -> Format:
        """Get a registered format.

        Raises:
            KeyError: If no format is registered under `name`
        """
        try:
            return self.formats[name]
        except KeyError:
            raise KeyError(
                f"Unknown format: {name}. Registered: {', '.join(self.names()) or 'none'}"
            ) from None

    def names(self) -> list[str]:
        """Return registered format names in registration order."""
        return list(self.formats)

    def encode(self, name: str, value: uuid.UUID | bytes) -> str:
        """Encode `value` with the format registered under `name`."""
        return self.get(name).encode(value)

    def decode(self, name: str, value: str) -> uuid.UUID:
        """Decode `value` with the format registered under `name`."""
        return self.get(name).decode(value)

    def __contains__(self, name: object) -> bool:
        return name in self.formats

    def __len__(self) -> int:
        return len(self.formats)
