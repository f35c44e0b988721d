"""Exception hierarchy for math-accent.

All errors derive from MathAccentError and carry an optional ``details``
mapping with machine-readable context about the failure.
"""

from __future__ import annotations

from typing import Any


class MathAccentError(Exception):
    """Base class for all math-accent errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({extra})"


class MalformedNodeError(MathAccentError):
    """A node does not have the type its caller required.

    This is a contract violation by whoever built the tree, never something
    to recover from.
    """

    def __init__(self, expected: str, actual: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            f"Expected node of type {expected!r}, got {actual!r}",
            details,
        )
        self.expected = expected
        self.actual = actual


class UnknownAccentError(MathAccentError):
    """An accent label has no glyph or stretchy asset."""

    def __init__(self, label: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Unknown accent: {label!r}", details)
        self.label = label


class ExpressionParseError(MathAccentError):
    """An expression document could not be loaded into parse nodes."""


class FontMetricsError(MathAccentError):
    """A font file could not be read for metrics."""


class ConfigError(MathAccentError):
    """The configuration file is invalid."""
