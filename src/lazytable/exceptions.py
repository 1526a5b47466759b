"""Exceptions for lazytable."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class LazyTableError(Exception):
    """
    Base exception for all lazytable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Validation Exceptions
# ---------------------------------------------------------------------------


class ValidationError(LazyTableError, ValueError):
    """
    Raised when a configuration value or argument is invalid.

    Attributes:
        field: Name of the offending field (e.g., "width", "border")
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


# ---------------------------------------------------------------------------
# Source Exceptions
# ---------------------------------------------------------------------------


class ConfigError(LazyTableError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load config from {source}: {reason}")


class InputError(LazyTableError):
    """
    Raised when table input cannot be turned into rows.

    Used by the command-line interface when a CSV, JSON or YAML document
    does not describe a list of rows.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read rows from {source}: {reason}")
