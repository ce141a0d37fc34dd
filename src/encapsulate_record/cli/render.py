"""Owner tables for ``show`` and ``demo``.

Rows are rendered as a Rich table when Rich is importable, and as a
fixed-width plain-text table on stderr otherwise.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from encapsulate_record.cli.console import console
from encapsulate_record.core.models import Person

OwnerRow = tuple[str, Person]


def _cell(value: str | None) -> str:
    """Show absent fields as ``-`` and empty ones as ``""``."""
    if value is None:
        return "-"
    return value if value else '""'


def _print_plain_table(title: str, rows: Sequence[OwnerRow]) -> None:
    """Render *rows* without Rich."""
    print(f"\n{title}", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Holder':<20} {'First name':<16} {'Last name':<16}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, person in rows:
        print(
            f"{label:<20} {_cell(person.first_name):<16} {_cell(person.last_name):<16}",
            file=sys.stderr,
        )
    print(file=sys.stderr)


def render_owners(title: str, rows: Sequence[OwnerRow]) -> None:
    """Print one line per ``(holder label, owner)`` pair."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(title, rows)
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Holder", style="bold", min_width=20)
    table.add_column("First name", min_width=12)
    table.add_column("Last name", min_width=12)

    for label, person in rows:
        table.add_row(label, _cell(person.first_name), _cell(person.last_name))

    console.print()
    console.print(table)
    console.print()
