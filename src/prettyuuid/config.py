"""
Configuration management for prettyuuid.

Loads named format definitions from prettyuuid.toml files using Pydantic.

Example prettyuuid.toml:

    default_format = "invoice"

    [formats.invoice]
    prefix = "invoice_"
    alphabet_name = "base36"

    [formats.user]
    prefix = "user_"
    alphabet = "0123456789abcdefghjkmnpqrstvwxyz"
"""

from __future__ import annotations

import json
import logging
import re
import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from prettyuuid.format import Format
from prettyuuid.registry import FormatRegistry

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "prettyuuid.toml"
DEFAULT_ALPHABET_NAME = "base62"

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def _toml_str(value: str) -> str:
    # JSON string escapes are a subset of TOML basic string escapes
    return json.dumps(value)


def _toml_key(key: str) -> str:
    return key if _BARE_KEY.match(key) else _toml_str(key)


class FormatConfig(BaseSettings):
    """Single named format configuration."""

    model_config = SettingsConfigDict(env_prefix="PRETTYUUID_FORMAT_")

    prefix: str = Field(default="", description="Literal prefix of every encoded UUID")
    alphabet: Optional[str] = Field(
        default=None, description="Digit symbols (takes precedence over alphabet_name)"
    )
    alphabet_name: Optional[str] = Field(
        default=None, description="Built-in alphabet name (e.g., base36, base62)"
    )

    def to_format(self) -> Format:
        """Convert to a validated Format instance.

        Raises:
            InvalidAlphabetError: If the alphabet is invalid
            ValueError: If alphabet_name is not a built-in alphabet
        """
        if self.alphabet is not None:
            return Format(self.prefix, self.alphabet)
        return FormatRegistry.load(self.alphabet_name or DEFAULT_ALPHABET_NAME, self.prefix)


class Config(BaseSettings):
    """Main configuration for prettyuuid."""

    model_config = SettingsConfigDict(env_prefix="PRETTYUUID_")

    formats: dict[str, FormatConfig] = Field(
        default_factory=dict, description="Formats by name"
    )
    default_format: Optional[str] = Field(
        default=None, description="Name of the format used when none is given"
    )

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Load configuration from TOML file.

        Args:
            path: Path to prettyuuid.toml file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        logger.info(f"Loading prettyuuid configuration from {config_path}")
        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(**data)

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Find and load configuration from prettyuuid.toml.

        Searches for prettyuuid.toml starting from start_dir and walking up
        parent directories until found or reaching filesystem root.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If no config file found
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        # Walk up directory tree
        while True:
            config_path = current / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                break
            current = parent

        raise FileNotFoundError(
            f"No {CONFIG_FILENAME} found in {start_dir} or parent directories."
        )

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write prettyuuid.toml
        """
        lines = ["# prettyuuid configuration", ""]
        if self.default_format is not None:
            lines.append(f"default_format = {_toml_str(self.default_format)}")
            lines.append("")

        for name, format_config in self.formats.items():
            lines.append(f"[formats.{_toml_key(name)}]")
            lines.append(f"prefix = {_toml_str(format_config.prefix)}")
            if format_config.alphabet is not None:
                lines.append(f"alphabet = {_toml_str(format_config.alphabet)}")
            if format_config.alphabet_name is not None:
                lines.append(f"alphabet_name = {_toml_str(format_config.alphabet_name)}")
            lines.append("")

        Path(path).write_text("\n".join(lines))

    def build_registry(self) -> FormatRegistry:
        """Build a FormatRegistry holding every configured format."""
        return FormatRegistry.from_config(self)

    def get_default_format(self) -> Format:
        """Build the default format.

        Raises:
            KeyError: If no default is set or it names an unknown format
        """
        if self.default_format is None:
            raise KeyError("No default_format configured")
        if self.default_format not in self.formats:
            raise KeyError(
                f"default_format '{self.default_format}' is not one of: "
                f"{', '.join(self.formats) or 'none'}"
            )
        return self.formats[self.default_format].to_format()
