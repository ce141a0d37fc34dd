"""Core owner store — the encapsulated default-owner record.

The stored :class:`~encapsulate_record.core.models.Person` never leaves
this module.  Reads hand out a fresh copy; writes build a fresh record
from the caller's field-bag and swap it in.  Nobody outside the store
can hold a reference to the stored record.

Guarantees
----------
* ``get()`` returns a new instance on every call, equal by value to the
  current record.
* ``set()`` copies values out of its argument and never keeps a
  reference to it.
* A failed ``set()`` leaves the current record unchanged.
"""

from __future__ import annotations

import logging

from encapsulate_record.core.models import FieldBag, Person

logger = logging.getLogger(__name__)

DEFAULT_OWNER_FIELDS: dict[str, str] = {"first_name": "Kaio", "last_name": "Silveira"}
"""Initial owner used when no explicit initial record is supplied."""


class OwnerStore:
    """Holder of one owner record, guarded by defensive copies.

    Parameters
    ----------
    initial:
        Field-bag for the starting record.  ``None`` (default) means
        :data:`DEFAULT_OWNER_FIELDS`.
    """

    def __init__(self, initial: FieldBag | None = None) -> None:
        self._initial: Person = Person.from_fields(
            DEFAULT_OWNER_FIELDS if initial is None else initial,
        )
        self._current: Person = self._initial

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self) -> Person:
        """Return a copy of the current owner."""
        return Person.from_fields(self._current)

    def set(self, fields: FieldBag) -> None:
        """Replace the current owner with a record built from *fields*.

        Raises
        ------
        InvalidArgumentError
            When *fields* cannot be turned into a :class:`Person`.
        """
        replacement = Person.from_fields(fields)
        # Single assignment: readers see either the old or the new record.
        self._current = replacement
        logger.debug("Default owner set to %r", replacement)

    def reset(self) -> None:
        """Restore the record this store was constructed with."""
        self._current = self._initial
        logger.debug("Default owner reset to %r", self._initial)


# ---------------------------------------------------------------------------
# Process-wide default store
# ---------------------------------------------------------------------------

_default_store: OwnerStore | None = None


def get_default_store() -> OwnerStore:
    """Return the process-wide store, creating it from settings on first use.

    Raises
    ------
    ConfigurationError
        When the ``DEFAULT_OWNER_*`` settings are invalid.
    """
    global _default_store
    if _default_store is None:
        from encapsulate_record.config import load_settings

        _default_store = OwnerStore(load_settings().as_fields())
    return _default_store


def get_default_owner() -> Person:
    """Return a copy of the process-wide default owner."""
    return get_default_store().get()


def set_default_owner(fields: FieldBag) -> None:
    """Replace the process-wide default owner."""
    get_default_store().set(fields)
