"""Configuration for math-accent.

Configuration is read from a YAML file, either given explicitly or named by
the ``MATH_ACCENT_CONFIG`` environment variable. Every key is optional:

    log_level: INFO
    precision: 5
    skew_char: skewchar
    fonts:
      Math-Italic: /path/to/math-italic.ttf
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from math_accent.exceptions import ConfigError

CONFIG_ENV_VAR = "MATH_ACCENT_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Runtime settings shared by the API and the CLI."""

    log_level: str = "WARNING"
    # Decimal places kept when boxes are exported
    precision: int = 5
    # Glyph name of the skew character in loaded fonts
    skew_char: str = "skewchar"
    fonts: dict[str, Path] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from ``path`` or the environment.

        Returns the defaults when neither names a file.

        Raises:
            FileNotFoundError: If the named file does not exist.
            ConfigError: If the file is not valid YAML or has bad values.
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if not env_path:
                return cls()
            path = env_path

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config root must be a mapping, got {type(data).__name__}"
            )
        return cls.from_dict(data, base_dir=config_path.parent)

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> Config:
        """Build a validated Config from a plain mapping."""
        config = cls()

        if "log_level" in data:
            level = data["log_level"]
            if not isinstance(level, str):
                raise ConfigError(
                    f"log_level: expected string, got {type(level).__name__}"
                )
            level = level.upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"log_level: must be one of {', '.join(LOG_LEVELS)}")
            config.log_level = level

        if "precision" in data:
            precision = data["precision"]
            # bool is an int subclass
            if not isinstance(precision, int) or isinstance(precision, bool):
                raise ConfigError(
                    f"precision: expected integer, got {type(precision).__name__}"
                )
            if not 1 <= precision <= 10:
                raise ConfigError("precision: must be between 1 and 10")
            config.precision = precision

        if "skew_char" in data:
            skew_char = data["skew_char"]
            if not isinstance(skew_char, str) or not skew_char:
                raise ConfigError("skew_char: expected non-empty glyph name")
            config.skew_char = skew_char

        fonts = data.get("fonts") or {}
        if not isinstance(fonts, dict):
            raise ConfigError(f"fonts: expected mapping, got {type(fonts).__name__}")
        for name, font_path in fonts.items():
            if not isinstance(font_path, str):
                raise ConfigError(
                    f"fonts.{name}: expected string path, got {type(font_path).__name__}"
                )
            resolved = Path(font_path).expanduser()
            if base_dir is not None and not resolved.is_absolute():
                resolved = base_dir / resolved
            config.fonts[str(name)] = resolved

        unknown = set(data) - {"log_level", "precision", "skew_char", "fonts"}
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        return config
