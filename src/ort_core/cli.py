"""Command-line converters: ``ort2json`` and ``json2ort``.

Both read one input file and write the converted file next to it, or into
the directory given with ``-o``::

    ort2json data.ort             # → data.json
    json2ort data.json -o out/    # → out/data.ort
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Sequence

from .errors import OrtError, OrtParseError
from .generator import generate
from .json_compat import from_json, to_json
from .parser import parse

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _build_parser(prog: str, source: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=f"Convert a {source} file.")
    parser.add_argument("input", type=Path, help=f"path to the .{source} file")
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=None,
        help="directory for the converted file (default: next to the input)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def output_path(input_path: Path, output_dir: Path | None, suffix: str) -> Path:
    """Return where the converted file for *input_path* is written."""
    if output_dir is None:
        return input_path.with_suffix(suffix)
    return output_dir / f"{input_path.stem}{suffix}"


def _run(
    argv: Sequence[str] | None,
    prog: str,
    source: str,
    suffix: str,
    convert: Callable[[str], str],
) -> int:
    args = _build_parser(prog, source).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        content = args.input.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Failed to read file '{args.input}': {exc}", file=sys.stderr)
        return 1

    try:
        converted = convert(content)
    except OrtParseError as exc:
        print(f"Failed to parse ORT: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"Failed to parse JSON: {exc}", file=sys.stderr)
        return 1
    except OrtError as exc:
        print(f"Failed to convert '{args.input}': {exc}", file=sys.stderr)
        return 1

    target = output_path(args.input, args.output_dir, suffix)
    try:
        if args.output_dir is not None:
            args.output_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(converted, encoding="utf-8")
    except OSError as exc:
        print(f"Failed to write file '{target}': {exc}", file=sys.stderr)
        return 1

    logger.debug("wrote %s", target)
    return 0


def _ort_to_json(content: str) -> str:
    return to_json(parse(content)) + "\n"


def _json_to_ort(content: str) -> str:
    return generate(from_json(content))


# ---------------------------------------------------------------------------
# CLI entry points
# ---------------------------------------------------------------------------

def ort2json(argv: Sequence[str] | None = None) -> int:
    """``ort2json <file.ort> [-o DIR]``"""
    return _run(argv, "ort2json", "ort", ".json", _ort_to_json)


def json2ort(argv: Sequence[str] | None = None) -> int:
    """``json2ort <file.json> [-o DIR]``"""
    return _run(argv, "json2ort", "json", ".ort", _json_to_ort)


def main() -> None:
    """Dispatch on the first argument: ``python -m ort_core.cli ort2json …``."""
    commands = {"ort2json": ort2json, "json2ort": json2ort}
    if len(sys.argv) < 2 or sys.argv[1] not in commands:
        print("Usage: python -m ort_core.cli {ort2json|json2ort} <file> [-o DIR]", file=sys.stderr)
        sys.exit(2)
    sys.exit(commands[sys.argv[1]](sys.argv[2:]))


def ort2json_main() -> None:
    sys.exit(ort2json())


def json2ort_main() -> None:
    sys.exit(json2ort())


if __name__ == "__main__":
    main()
