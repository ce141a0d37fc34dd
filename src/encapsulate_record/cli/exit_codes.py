"""Process exit codes returned by ``encapsulate-record``.

Every return path in :mod:`encapsulate_record.cli.app` uses one of
these names, and the tests assert on them instead of bare integers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command ran to completion."""

GENERAL_ERROR: int = 1
"""An :class:`EncapsulateRecordError` was reported to the user."""

UNEXPECTED_ERROR: int = 2
"""Something outside our exception hierarchy escaped the command."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
