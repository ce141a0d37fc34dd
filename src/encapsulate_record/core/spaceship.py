"""Caller scenario: a spaceship that remembers the owner it was given.

The spaceship keeps whatever record the owner source handed it.  Later
changes to the default owner must not show up on the spaceship, which
is only true because the source returns copies.
"""

from __future__ import annotations

from dataclasses import dataclass

from encapsulate_record.core.models import Person
from encapsulate_record.core.protocols import OwnerSource


@dataclass(slots=True)
class Spaceship:
    """A mutable caller structure holding a reference to its owner."""

    name: str
    owner: Person | None = None


def launch_spaceship_scenario(source: OwnerSource) -> Spaceship:
    """Attach the current owner to a new ship, then change the default twice.

    The returned ship still reports the owner read before either change.
    """
    spaceship = Spaceship(name="Nebuchadnezzar")
    spaceship.owner = source.get()

    source.set({"first_name": "Gabriella", "last_name": "Caetano"})
    source.set({"first_name": "Morpheus", "last_name": ""})

    return spaceship
