"""Helpers for reading text that contains HTML tags and entities."""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple

HTML_ENTITIES = {
    "quot": '"',
    "apos": "'",
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "nbsp": " ",
    "iexcl": "¡",
    "cent": "¢",
    "pound": "£",
    "curren": "¤",
    "yen": "¥",
    "brvbar": "¦",
    "sect": "§",
    "uml": "¨",
    "copy": "©",
    "ordf": "ª",
    "laquo": "«",
    "not": "¬",
    "shy": "\u00ad",
    "reg": "®",
    "macr": "¯",
    "deg": "°",
    "plusmn": "±",
    "sup2": "²",
    "sup3": "³",
    "acute": "´",
    "micro": "µ",
    "para": "¶",
    "middot": "·",
    "cedil": "¸",
    "sup1": "¹",
    "ordm": "º",
    "raquo": "»",
    "frac14": "¼",
    "frac12": "½",
    "frac34": "¾",
    "iquest": "¿",
    "times": "×",
    "divide": "÷",
    "Agrave": "À",
    "Aacute": "Á",
    "Acirc": "Â",
    "Atilde": "Ã",
    "Auml": "Ä",
    "Aring": "Å",
    "AElig": "Æ",
    "Ccedil": "Ç",
    "Egrave": "È",
    "Eacute": "É",
    "Ecirc": "Ê",
    "Euml": "Ë",
    "Igrave": "Ì",
    "Iacute": "Í",
    "Icirc": "Î",
    "Iuml": "Ï",
    "ETH": "Ð",
    "Ntilde": "Ñ",
    "Ograve": "Ò",
    "Oacute": "Ó",
    "Ocirc": "Ô",
    "Otilde": "Õ",
    "Ouml": "Ö",
    "Oslash": "Ø",
    "Ugrave": "Ù",
    "Uacute": "Ú",
    "Ucirc": "Û",
    "Uuml": "Ü",
    "Yacute": "Ý",
    "THORN": "Þ",
    "szlig": "ß",
    "agrave": "à",
    "aacute": "á",
    "acirc": "â",
    "atilde": "ã",
    "auml": "ä",
    "aring": "å",
    "aelig": "æ",
    "ccedil": "ç",
    "egrave": "è",
    "eacute": "é",
    "ecirc": "ê",
    "euml": "ë",
    "igrave": "ì",
    "iacute": "í",
    "icirc": "î",
    "iuml": "ï",
    "eth": "ð",
    "ntilde": "ñ",
    "ograve": "ò",
    "oacute": "ó",
    "ocirc": "ô",
    "otilde": "õ",
    "ouml": "ö",
    "oslash": "ø",
    "ugrave": "ù",
    "uacute": "ú",
    "ucirc": "û",
    "uuml": "ü",
    "yacute": "ý",
    "thorn": "þ",
    "yuml": "ÿ",
}

_MAX_ENTITY_SPAN = 10
_NUMERIC = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


def skip_html_tag(content: Sequence[str], i: int) -> int:
    """Return the index just past the tag opened at ``i``, or ``i`` if it is never closed."""
    for j in range(i + 1, len(content)):
        if content[j] == ">":
            return j + 1
    return i


def _codepoint_to_char(code: int) -> str:
    if 0 <= code <= 0x10FFFF and not 0xD800 <= code <= 0xDFFF:
        return chr(code)
    return "\ufffd"


def decode_html_entity_at(content: Sequence[str], i: int) -> Tuple[Optional[str], int]:
    """Decode the entity starting at ``i``.

    Returns the decoded character and the index after the entity, or
    ``(None, i)`` when no valid entity starts there.
    """
    end = next((j for j in range(i + 1, len(content)) if content[j] == ";"), None)
    if end is None or end - i > _MAX_ENTITY_SPAN:
        return None, i
    name = "".join(content[i + 1 : end])
    if name.startswith("#"):
        digits = name[1:]
        if not _NUMERIC.fullmatch(digits):
            return None, i
        code = int(digits)
        if not _INT32_MIN <= code <= _INT32_MAX:
            return None, i
        return _codepoint_to_char(code), end + 1
    ch = HTML_ENTITIES.get(name)
    if ch is None:
        return None, i
    return ch, end + 1