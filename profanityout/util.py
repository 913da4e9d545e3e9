"""Unicode normalisation helpers."""

from __future__ import annotations

import unicodedata

_FIRST_SUPPORTED = " "
_LAST_SUPPORTED = "~"


def _is_plain_ascii(s: str) -> bool:
    return all(_FIRST_SUPPORTED <= ch <= _LAST_SUPPORTED for ch in s)


def remove_accents(s: str) -> str:
    """Strip combining marks from every character, returning NFC text."""
    if _is_plain_ascii(s):
        return s
    decomposed = unicodedata.normalize("NFD", s)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def normalize_as_nfc(s: str) -> str:
    """Return ``s`` in Unicode normal form C."""
    if _is_plain_ascii(s):
        return s
    return unicodedata.normalize("NFC", s)