"""Core layer — the owner record, its store, and the callers that use it.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from encapsulate_record.core.models import FieldBag, Person
from encapsulate_record.core.owner_store import (
    DEFAULT_OWNER_FIELDS,
    OwnerStore,
    get_default_owner,
    get_default_store,
    set_default_owner,
)
from encapsulate_record.core.protocols import OwnerSource
from encapsulate_record.core.spaceship import Spaceship, launch_spaceship_scenario

__all__: list[str] = [
    "DEFAULT_OWNER_FIELDS",
    "FieldBag",
    "OwnerSource",
    "OwnerStore",
    "Person",
    "Spaceship",
    "get_default_owner",
    "get_default_store",
    "launch_spaceship_scenario",
    "set_default_owner",
]
