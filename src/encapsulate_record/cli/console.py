"""Stderr console used by ``show``, ``demo`` and the error boundary.

Owner tables and error messages carry Rich markup.  Rich is looked up
on each print, so ``--help``/``--version`` never need it, and a missing
Rich degrades every message to a plain stderr line.
"""

from __future__ import annotations

import sys
from typing import Any

from encapsulate_record.exceptions import MissingDependencyError


def get_rich_console() -> Any:
    """Return a Rich console bound to stderr.

    Raises
    ------
    MissingDependencyError
        When Rich cannot be imported.
    """
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "Rich console output is unavailable.",
            hint="pip install rich",
        ) from exc
    return Console(stderr=True)


class _StderrConsole:
    """Single ``print`` entry point shared by the CLI modules."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _StderrConsole()
