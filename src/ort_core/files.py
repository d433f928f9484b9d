"""File wrappers around :func:`parse` and :func:`generate`."""

from __future__ import annotations

import logging
import os
from typing import Any

from .generator import generate
from .model import OrtValue
from .parser import parse

logger = logging.getLogger(__name__)


def load(path: str | os.PathLike[str]) -> OrtValue:
    """Read a UTF-8 ORT file and parse it."""
    logger.debug("loading %s", path)
    with open(path, encoding="utf-8") as fh:
        return parse(fh.read())


def dump(value: Any, path: str | os.PathLike[str]) -> None:
    """Generate ORT text for *value* (native data or OrtValue) and write it."""
    text = generate(value)
    logger.debug("writing %d characters to %s", len(text), path)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)
