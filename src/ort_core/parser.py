"""Parser: ORT text → OrtValue."""

from __future__ import annotations

import logging

from .errors import OrtParseError
from .fields import Field
from .literals import scalar_to_native, unescape
from .model import Native, OrtValue
from .reader import Line, Section, parse_header, read_sections
from .splitter import split_pair, split_values

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: str) -> OrtValue:
    """Parse an ORT document.

    Named sections are collected into a top-level object. The first
    anonymous section (``:fields:``) ends the scan and becomes the whole
    result: a single record is returned unwrapped, otherwise an array.
    """
    preamble, sections = read_sections(text)

    if preamble:
        if not sections and len(preamble) == 1:
            # Bare literal document, as produced for top-level scalars
            line = preamble[0]
            return OrtValue(_parse_native(line.text, line))
        _raise_bad_header(preamble[0])

    result: dict[str, Native] = {}
    for section in sections:
        header = parse_header(section.header)
        logger.debug(
            "section at line %d: key=%r, %d field(s), %d data line(s)",
            section.header.num, header.key, len(header.fields), len(section.data),
        )

        if header.key is None:
            if header.literal is not None:
                return OrtValue(_parse_native(header.literal, section.header))
            value = _parse_section_data(section, header.fields)
            if header.fields and len(section.data) == 1:
                return OrtValue(value[0])
            return OrtValue(value)

        result[header.key] = _parse_section_data(section, header.fields)

    return OrtValue(result)


def parse_value(s: str, line_num: int = 1) -> OrtValue:
    """Parse a single isolated value string (scalar, ``[...]`` or ``(...)``)."""
    return OrtValue(_parse_native(s, Line(num=line_num, raw=s, text=s.strip())))


# ---------------------------------------------------------------------------
# Sections and records
# ---------------------------------------------------------------------------

def _raise_bad_header(line: Line) -> None:
    if ":" not in line.text:
        raise OrtParseError(line.num, line.raw, "Invalid header format: missing ':'")
    raise OrtParseError(line.num, line.raw, "Invalid header format: expected trailing ':'")


def _parse_section_data(section: Section, fields: list[Field]) -> Native:
    if not fields:
        # Only the first data line is consulted
        if not section.data:
            return None
        first = section.data[0]
        return _parse_native(first.text, first)

    return [_parse_record(line, fields) for line in section.data]


def _parse_record(line: Line, fields: list[Field]) -> dict[str, Native]:
    values = split_values(line.text)
    if len(values) != len(fields):
        raise OrtParseError(
            line.num,
            line.raw,
            f"Expected {len(fields)} values but got {len(values)}",
        )
    return {
        f.name: _parse_field_value(f, v, line)
        for f, v in zip(fields, values)
    }


def _parse_field_value(f: Field, s: str, line: Line) -> Native:
    if not f.is_nested:
        return _parse_native(s, line)

    trimmed = s.strip()
    # Anything other than a non-empty tuple falls back to the generic grammar
    if not (trimmed.startswith("(") and trimmed.endswith(")")) or trimmed == "()":
        return _parse_native(trimmed, line)

    values = split_values(trimmed[1:-1])
    if len(values) != len(f.children):
        raise OrtParseError(
            line.num,
            line.raw,
            f"Expected {len(f.children)} nested values but got {len(values)}",
        )
    return {
        child.name: _parse_field_value(child, v, line)
        for child, v in zip(f.children, values)
    }


# ---------------------------------------------------------------------------
# Generic values
# ---------------------------------------------------------------------------

def _parse_native(s: str, line: Line) -> Native:
    trimmed = s.strip()

    if not trimmed:
        return None
    if trimmed == "[]":
        return []
    if trimmed == "()":
        return {}
    if trimmed.startswith("[") and trimmed.endswith("]"):
        body = trimmed[1:-1]
        if not body.strip():
            return []
        return [_parse_native(v, line) for v in split_values(body)]
    if trimmed.startswith("(") and trimmed.endswith(")"):
        return _parse_inline_object(trimmed[1:-1], line)
    return scalar_to_native(trimmed)


def _parse_inline_object(body: str, line: Line) -> dict[str, Native]:
    obj: dict[str, Native] = {}
    for pair in split_values(body):
        parts = split_pair(pair)
        if parts is None:
            # Pieces without a colon carry no key and are dropped
            continue
        key, value = parts
        obj[unescape(key.strip())] = _parse_native(value, line)
    return obj
