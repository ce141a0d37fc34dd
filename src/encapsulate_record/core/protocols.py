"""Protocols (interfaces) consumed by caller code.

Callers that read or replace the default owner depend ONLY on
:class:`OwnerSource` — never on the concrete store — so a fresh store
can be injected wherever isolation is needed.
"""

from __future__ import annotations

from typing import Protocol

from encapsulate_record.core.models import FieldBag, Person


class OwnerSource(Protocol):
    """Contract for anything that hands out and replaces an owner record.

    Any object that implements :meth:`get` and :meth:`set` with the
    correct signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def get(self) -> Person:
        """Return a copy of the current owner.

        The returned instance must not be the object held internally;
        callers are free to keep it for as long as they like.
        """
        ...  # pragma: no cover

    def set(self, fields: FieldBag) -> None:
        """Replace the current owner with a record built from *fields*.

        Raises
        ------
        InvalidArgumentError
            When *fields* cannot be turned into a :class:`Person`.
        """
        ...  # pragma: no cover
