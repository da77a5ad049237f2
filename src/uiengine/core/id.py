"""Identifiers for log correlation.

ULID-based, prefixed by kind so log lines stay readable:
``sess_01J...`` for a mounted document session, ``disp_01J...`` for one
dispatched action.
"""

from typing import NewType
from ulid import ULID

SessionID = NewType("SessionID", str)
"""Mounted document session identifier"""

DispatchID = NewType("DispatchID", str)
"""Single action dispatch identifier"""


class Prefix:
    """ID prefix constants."""

    SESSION = "sess"
    DISPATCH = "disp"


def _with_prefix(prefix: str) -> str:
    return f"{prefix}_{ULID()}"


def new_session_id() -> SessionID:
    """Generate new session ID."""
    return SessionID(_with_prefix(Prefix.SESSION))


def new_dispatch_id() -> DispatchID:
    """Generate new dispatch ID."""
    return DispatchID(_with_prefix(Prefix.DISPATCH))


def extract_prefix(id_str: str) -> str | None:
    """Return the prefix of a prefixed ID, or None."""
    parts = id_str.split("_")
    return parts[0] if len(parts) == 2 else None


def is_valid(id_str: str) -> bool:
    """Check that the ULID part of an ID parses."""
    ulid_part = id_str.split("_", 1)[1] if "_" in id_str else id_str
    if len(ulid_part) != 26:
        return False
    try:
        ULID.from_str(ulid_part)
        return True
    except ValueError:
        return False
