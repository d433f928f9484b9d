"""Depth-aware splitting of rows, collection bodies and ``key:value`` pairs."""

from __future__ import annotations


def split_values(s: str) -> list[str]:
    """Split *s* on top-level commas.

    ``(...)`` and ``[...]`` depths are tracked separately. A backslash
    escapes exactly the next character; the escape is kept in the piece so
    that the value parser can resolve it later.

    >>> split_values("a,(b,c),[d,e],f")
    ['a', '(b,c)', '[d,e]', 'f']
    """
    pieces: list[str] = []
    current: list[str] = []
    paren_depth = 0
    bracket_depth = 0
    escaped = False

    for ch in s:
        if escaped:
            current.append(ch)
            escaped = False
            continue

        if ch == "\\":
            escaped = True
        elif ch == "(":
            paren_depth += 1
        elif ch == ")":
            paren_depth -= 1
        elif ch == "[":
            bracket_depth += 1
        elif ch == "]":
            bracket_depth -= 1
        elif ch == "," and paren_depth == 0 and bracket_depth == 0:
            pieces.append("".join(current))
            current = []
            continue
        current.append(ch)

    pieces.append("".join(current))
    return pieces


def split_pair(s: str) -> tuple[str, str] | None:
    """Split ``key:value`` on the first unescaped colon outside any group.

    Returns ``None`` when there is no such colon.
    """
    paren_depth = 0
    bracket_depth = 0
    escaped = False

    for i, ch in enumerate(s):
        if escaped:
            escaped = False
            continue
        if ch == "\\":
            escaped = True
        elif ch == "(":
            paren_depth += 1
        elif ch == ")":
            paren_depth -= 1
        elif ch == "[":
            bracket_depth += 1
        elif ch == "]":
            bracket_depth -= 1
        elif ch == ":" and paren_depth == 0 and bracket_depth == 0:
            return s[:i], s[i + 1:]
    return None
