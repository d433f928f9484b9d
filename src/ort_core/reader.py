"""Reader layer: splits ORT text into sections and parses header lines."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import OrtParseError
from .fields import Field


# ---------------------------------------------------------------------------
# Lines and sections
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Line:
    num: int    # 1-based
    raw: str    # untrimmed, as it appears in the source
    text: str   # trimmed


@dataclass(slots=True)
class Section:
    """A header line and the data lines that follow it."""
    header: Line
    data: list[Line] = field(default_factory=list)


@dataclass(slots=True)
class Header:
    key: str | None                 # None for the anonymous ``:`` form
    fields: list[Field] = field(default_factory=list)
    literal: str | None = None      # body of an anonymous ``:[...]`` header


def is_header(text: str) -> bool:
    """A trimmed line is a header iff it starts with ``:`` or its last
    colon-delimited segment is empty (i.e. it ends with ``:``)."""
    return text.startswith(":") or text.endswith(":")


def iter_lines(text: str) -> Iterator[Line]:
    """Yield content lines, skipping blank lines and ``#`` comments."""
    for num, raw in enumerate(text.split("\n"), 1):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        yield Line(num=num, raw=raw, text=stripped)


def read_sections(text: str) -> tuple[list[Line], list[Section]]:
    """Partition *text* into sections.

    Returns ``(preamble, sections)`` where *preamble* holds the content lines
    seen before the first header. Header lines are not parsed here.
    """
    preamble: list[Line] = []
    sections: list[Section] = []
    current: Section | None = None

    for line in iter_lines(text):
        if is_header(line.text):
            current = Section(header=line)
            sections.append(current)
        elif current is None:
            preamble.append(line)
        else:
            current.data.append(line)

    return preamble, sections


# ---------------------------------------------------------------------------
# Header parsing
# ---------------------------------------------------------------------------

def parse_header(line: Line) -> Header:
    """Parse one of the three header dialects.

    ``:a,b:`` → anonymous; ``key:a,b:`` → named tabular; ``key:`` → named
    single value. An anonymous header whose body is a bracketed literal
    (``:[1,2]``) carries that literal instead of a field list.
    """
    text = line.text
    indent = len(line.raw) - len(line.raw.lstrip())

    if text.startswith(":"):
        body = text[1:]
        if body.startswith("[") and body.endswith("]"):
            return Header(key=None, literal=body)
        if body.endswith(":"):
            body = body[:-1]
        return Header(key=None, fields=parse_fields(body, line, indent + 1))

    colon = text.find(":")
    if colon == -1:
        raise OrtParseError(line.num, line.raw, "Invalid header format: missing ':'")

    key = text[:colon].strip()
    rest = text[colon + 1:]
    if rest.endswith(":"):
        rest = rest[:-1]
    lead = len(rest) - len(rest.lstrip())
    fields = parse_fields(rest.strip(), line, indent + colon + 1 + lead)
    return Header(key=key, fields=fields)


def parse_fields(fields_str: str, line: Line, offset: int = 0) -> list[Field]:
    """Parse a comma-separated field list with nested ``name(a,b)`` groups.

    *offset* is the 0-based position of *fields_str* within ``line.raw`` and
    is only used to report 1-based error columns.
    """
    result: list[Field] = []
    current: list[str] = []
    i = 0
    n = len(fields_str)

    while i < n:
        ch = fields_str[i]

        if ch == "(":
            name = "".join(current).strip()
            current = []
            start = i + 1
            depth = 1
            i += 1
            while i < n and depth > 0:
                if fields_str[i] == "(":
                    depth += 1
                elif fields_str[i] == ")":
                    depth -= 1
                i += 1
            if depth > 0:
                raise OrtParseError(
                    line.num, line.raw, "Unclosed parenthesis", column=offset + start
                )
            nested = parse_fields(fields_str[start:i - 1], line, offset + start)
            result.append(Field(name, nested))
            continue

        if ch == ")":
            raise OrtParseError(
                line.num, line.raw, "Unmatched closing parenthesis", column=offset + i + 1
            )

        if ch == ",":
            name = "".join(current).strip()
            if name:
                result.append(Field(name))
            current = []
        else:
            current.append(ch)
        i += 1

    name = "".join(current).strip()
    if name:
        result.append(Field(name))
    return result
