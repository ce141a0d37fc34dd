"""Domain models for encapsulate-record.

:class:`Person` is a **frozen** dataclass — an immutable value object
with no behaviour beyond data access and copying.  It carries zero I/O
and zero dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from encapsulate_record.exceptions import InvalidArgumentError

FieldBag = Union["Person", Mapping[str, Any]]
"""Anything :meth:`Person.from_fields` accepts."""

_FIELD_KEYS: dict[str, tuple[str, str]] = {
    "first_name": ("first_name", "firstName"),
    "last_name": ("last_name", "lastName"),
}


# ---------------------------------------------------------------------------
# Owner record
# ---------------------------------------------------------------------------

# Not slotted: frozen+slots raises TypeError for unknown attribute names on 3.10/3.11.
@dataclass(frozen=True)
class Person:
    """A first and last name, fixed at construction time."""

    first_name: str | None
    """Given name, or ``None`` when the field-bag omitted it."""

    last_name: str | None
    """Family name, or ``None`` when the field-bag omitted it."""

    @classmethod
    def from_fields(cls, fields: FieldBag) -> Person:
        """Build a new :class:`Person` by copying values out of *fields*.

        *fields* may be another :class:`Person` or a mapping keyed by
        ``first_name``/``last_name`` (``firstName``/``lastName`` are
        accepted too).  Missing keys become ``None``.  The result never
        references *fields*.

        Raises
        ------
        InvalidArgumentError
            If *fields* is neither a mapping nor a :class:`Person`, or a
            value is not a string.
        """
        if isinstance(fields, Person):
            return cls(first_name=fields.first_name, last_name=fields.last_name)
        if not isinstance(fields, Mapping):
            raise InvalidArgumentError(
                f"Expected a mapping of name fields, got {type(fields).__name__}.",
                hint="Pass e.g. {'first_name': 'Kaio', 'last_name': 'Silveira'}.",
            )
        values = {
            attr: _lookup(fields, keys) for attr, keys in _FIELD_KEYS.items()
        }
        return cls(**values)

    def to_dict(self) -> dict[str, str | None]:
        """Return the fields as a fresh plain ``dict``."""
        return {"first_name": self.first_name, "last_name": self.last_name}

    @property
    def display_name(self) -> str:
        """First and last name joined by a space, skipping empty parts."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)


def _lookup(fields: Mapping[str, Any], keys: tuple[str, str]) -> str | None:
    """Return the first present key of *keys* in *fields*, type-checked."""
    for key in keys:
        if key in fields:
            value = fields[key]
            if value is not None and not isinstance(value, str):
                raise InvalidArgumentError(
                    f"Field {key!r} must be a string, got {type(value).__name__}.",
                )
            return value
    return None
