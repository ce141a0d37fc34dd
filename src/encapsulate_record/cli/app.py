"""CLI application entry point and command routing for encapsulate-record.

This module is the **sole error boundary** for the entire application.
It catches :class:`~encapsulate_record.exceptions.EncapsulateRecordError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Commands
--------
* ``encapsulate-record show``  — print the current default owner
* ``encapsulate-record demo``  — replay the spaceship aliasing scenario
* ``encapsulate-record --version``
"""

from __future__ import annotations

import argparse
import logging
import sys

from encapsulate_record.cli import exit_codes
from encapsulate_record.cli.console import console
from encapsulate_record.exceptions import EncapsulateRecordError
from encapsulate_record.version import __version__

COMMANDS: tuple[str, ...] = ("show", "demo")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="encapsulate-record",
        description="Shared default owner guarded by defensive copies.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log store activity at DEBUG level.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=COMMANDS,
        help="'show' prints the default owner; 'demo' runs the spaceship scenario.",
    )
    parser.add_argument(
        "--first-name",
        default=None,
        help="With 'show': set this first name before printing.",
    )
    parser.add_argument(
        "--last-name",
        default=None,
        help="With 'show': set this last name before printing.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_show(first_name: str | None, last_name: str | None) -> int:
    """Print the default owner, replacing it first if names were given.

    A name flag that is omitted keeps the current value of that field.
    """
    from encapsulate_record.cli.render import render_owners
    from encapsulate_record.core.owner_store import get_default_store

    store = get_default_store()
    if first_name is not None or last_name is not None:
        current = store.get()
        store.set(
            {
                "first_name": current.first_name if first_name is None else first_name,
                "last_name": current.last_name if last_name is None else last_name,
            }
        )

    render_owners("Default owner", [("default owner", store.get())])
    return exit_codes.SUCCESS


def _handle_demo() -> int:
    """Run the spaceship scenario on a fresh store and show who owns what."""
    from encapsulate_record.cli.render import render_owners
    from encapsulate_record.config import load_settings
    from encapsulate_record.core.owner_store import OwnerStore
    from encapsulate_record.core.spaceship import launch_spaceship_scenario

    store = OwnerStore(load_settings().as_fields())
    spaceship = launch_spaceship_scenario(store)
    if spaceship.owner is None:
        raise EncapsulateRecordError(
            f"Spaceship {spaceship.name} was launched without an owner.",
        )

    render_owners(
        "Spaceship scenario",
        [
            (f"spaceship {spaceship.name}", spaceship.owner),
            ("default owner", store.get()),
        ],
    )
    if spaceship.owner == store.get():
        console.print("[bold red]The spaceship owner followed the default.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print(
        "[bold green]The spaceship kept its own copy of the owner.[/bold green]"
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the encapsulate-record CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "demo":
        if args.first_name is not None or args.last_name is not None:
            parser.error("--first-name and --last-name only apply to 'show'")
        return _handle_demo()

    return _handle_show(args.first_name, args.last_name)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except EncapsulateRecordError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
