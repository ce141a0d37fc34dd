"""Custom exception hierarchy for encapsulate-record.

All exceptions that cross layer boundaries must inherit from
:class:`EncapsulateRecordError`.  Lower-level errors (e.g. pydantic
validation failures) must be caught where they occur and re-raised as
a typed subclass defined here.

Hierarchy
---------
EncapsulateRecordError
├── InvalidArgumentError
├── ConfigurationError
└── MissingDependencyError
"""

from __future__ import annotations


class EncapsulateRecordError(Exception):
    """Base exception for all encapsulate-record errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Record construction ---------------------------------------------------

class InvalidArgumentError(EncapsulateRecordError):
    """Raised when a field-bag cannot be turned into a record."""


# --- Settings --------------------------------------------------------------

class ConfigurationError(EncapsulateRecordError):
    """Raised when the owner settings fail validation."""


# --- Optional tooling ------------------------------------------------------

class MissingDependencyError(EncapsulateRecordError):
    """Raised when an optional runtime package (e.g. Rich) is not installed."""
