"""Allow ``python -m encapsulate_record`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m encapsulate_record`` behaves identically to the
``encapsulate-record`` console script.
"""

from __future__ import annotations

from encapsulate_record.cli.app import cli

if __name__ == "__main__":
    cli()
