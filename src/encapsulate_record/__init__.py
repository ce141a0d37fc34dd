"""encapsulate-record — a shared default owner behind defensive-copy accessors.

Readers get their own copy of the record, so later writes to the shared
default never reach data that callers have already stored.
"""

from encapsulate_record.version import __version__

__all__: list[str] = ["__version__"]
