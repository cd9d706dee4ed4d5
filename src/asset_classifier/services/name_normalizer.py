"""Name normalizer — canonical token string for every downstream matcher."""

from __future__ import annotations

import re

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
# Word characters minus underscore; CJK letters survive so the CJK rules can match.
_SEPARATOR_RE = re.compile(r"[\W_]+")


def strip_extension(name: str) -> str:
    """Drop a trailing ``.ext`` (only when it follows the last slash)."""
    return _EXTENSION_RE.sub("", name)


def normalize(name: str) -> str:
    """Return the lowercase, space-separated token string for *name*.

    ``"Desktop_UserMgmt_List_Default@2x.png"`` → ``"desktop usermgmt list default 2x"``.
    Total and idempotent: any input yields a string, possibly empty.
    """
    text = strip_extension(name).lower()
    return _SEPARATOR_RE.sub(" ", text).strip()
