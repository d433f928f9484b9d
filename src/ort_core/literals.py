"""Escaping alphabet, number formatting and scalar type inference.

Shared by the parser (which unescapes) and the generator (which escapes).
"""

from __future__ import annotations

import math
import re

from .model import Native

_NUMBER_RE = re.compile(r"^[+-]?((\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?|inf|nan)$")

# Characters that carry structure inside a value and must be backslashed
_SPECIAL = frozenset("()[],\\")

_ESCAPE_MAP: dict[str, str] = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}

_UNESCAPE_MAP: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------

def escape(s: str) -> str:
    """Backslash structural characters and spell control characters out."""
    out: list[str] = []
    for ch in s:
        if ch in _SPECIAL:
            out.append("\\" + ch)
        elif ch in _ESCAPE_MAP:
            out.append(_ESCAPE_MAP[ch])
        else:
            out.append(ch)
    return "".join(out)


def unescape(s: str) -> str:
    """Resolve backslash sequences: ``\\n``, ``\\t``, ``\\r``, else literal."""
    out: list[str] = []
    escaped = False
    for ch in s:
        if escaped:
            out.append(_UNESCAPE_MAP.get(ch, ch))
            escaped = False
        elif ch == "\\":
            escaped = True
        else:
            out.append(ch)
    # A dangling backslash at end of input is dropped
    return "".join(out)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def format_number(n: float) -> str:
    """Render *n* as canonical decimal text; integral values lose ``.0``.

    Non-finite values come out as ``inf``, ``-inf`` and ``nan``, which the
    number grammar reads back.
    """
    if math.isfinite(n) and n == int(n):
        return str(int(n))
    return repr(n)


def is_number_text(s: str) -> bool:
    return _NUMBER_RE.match(s) is not None


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def scalar_to_native(raw: str) -> Native:
    """Infer the type of an isolated, trimmed, non-collection value string.

    - escape sequences resolved first
    - full-match numbers → float
    - ``true`` / ``false`` → bool
    - everything else → str
    """
    text = unescape(raw)
    if is_number_text(text):
        return float(text)
    if text == "true":
        return True
    if text == "false":
        return False
    return text
