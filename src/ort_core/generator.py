"""Generator: OrtValue → canonical ORT text."""

from __future__ import annotations

import logging
from typing import Any

from .fields import Field
from .literals import escape, format_number
from .model import OrtValue

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def generate(value: OrtValue | Any) -> str:
    """Render *value* as ORT text.

    - object with one key → a single named section
    - any other object → one ``key:`` block per entry, blank-line separated
    - array → anonymous ``:`` section (tabular or ``:[...]``)
    - scalar → its literal form
    """
    if not isinstance(value, OrtValue):
        value = OrtValue(value)

    if value.is_object():
        entries = value.as_object()
        if len(entries) == 1:
            key, child = next(iter(entries.items()))
            return _generate_section(key, child)
        return _generate_multi_section(entries)

    if value.is_array():
        items = value.as_array()
        # A single tabular record would be unwrapped on parse
        if len(items) > 1 and is_uniform_object_array(items):
            table = _generate_table(":", items)
            if table is not None:
                logger.debug("top-level array: tabular form, %d row(s)", len(items))
                return table
        logger.debug("top-level array: literal form")
        return ":" + generate_literal(value)

    return generate_literal(value)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _generate_multi_section(entries: dict[str, OrtValue]) -> str:
    blocks = [_generate_section(key, child) for key, child in entries.items()]
    if not blocks:
        return ""
    return "\n\n".join(b.rstrip() for b in blocks) + "\n"


def _generate_section(key: str, value: OrtValue) -> str:
    if value.is_array():
        items = value.as_array()
        if is_uniform_object_array(items):
            table = _generate_table(f"{key}:", items)
            if table is not None:
                logger.debug("section %r: tabular form, %d row(s)", key, len(items))
                return table
    logger.debug("section %r: literal form", key)
    return f"{key}:\n{generate_literal(value)}"


def is_uniform_object_array(items: list[OrtValue]) -> bool:
    """True when *items* is non-empty and every element is an object with
    the same key set as the first (key order ignored).

    Objects without keys have no header to describe them and stay literal.
    """
    if not items or not all(item.is_object() for item in items):
        return False
    first_keys = set(items[0].as_object())
    if not first_keys:
        return False
    return all(set(item.as_object()) == first_keys for item in items[1:])


# ---------------------------------------------------------------------------
# Tabular form
# ---------------------------------------------------------------------------

def header_fields(record: OrtValue) -> list[Field]:
    """Derive the header fields from the first record of a table.

    A member whose value is a non-empty object becomes a nested group.
    """
    fields: list[Field] = []
    for name, child in record.as_object().items():
        if child.is_object() and len(child) > 0:
            fields.append(Field(name, header_fields(child)))
        else:
            fields.append(Field(name))
    return fields


def _generate_table(prefix: str, items: list[OrtValue]) -> str | None:
    """Render *items* as a header plus one row per record.

    Returns ``None`` when a row would come out blank (e.g. a lone null
    cell): the reader skips blank lines, so such a table cannot be read
    back and the caller falls back to the literal form.
    """
    fields = header_fields(items[0])
    rows = [_generate_row(item, fields) for item in items]
    if any(not row.strip() for row in rows):
        logger.debug("blank row in table, using literal form")
        return None
    header = prefix + ",".join(str(f) for f in fields) + ":"
    return "\n".join([header, *rows])


def _generate_row(record: OrtValue, fields: list[Field]) -> str:
    # Values are looked up by name, emitted in header order
    return ",".join(
        _generate_cell(record.get_or_default(f.name), f) for f in fields
    )


def _generate_cell(value: OrtValue, f: Field) -> str:
    if f.is_nested and value.is_object() and len(value) > 0:
        return "(" + _generate_row(value, f.children) + ")"
    return generate_literal(value)


# ---------------------------------------------------------------------------
# Literal form
# ---------------------------------------------------------------------------

def generate_literal(value: OrtValue) -> str:
    """Render *value* in inline literal syntax."""
    if value.is_null():
        return ""
    if value.is_bool():
        return "true" if value.as_bool() else "false"
    if value.is_number():
        return format_number(value.as_number())
    if value.is_string():
        return escape(value.as_string())
    if value.is_array():
        return "[" + ",".join(generate_literal(v) for v in value.as_array()) + "]"
    pairs = [f"{escape(k)}:{generate_literal(v)}" for k, v in value.as_object().items()]
    return "(" + ",".join(pairs) + ")"
