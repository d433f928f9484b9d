"""ORT Core — parser and generator for the ORT tabular/literal data format."""

from .errors import OrtError, OrtIndexError, OrtKeyError, OrtParseError, OrtTypeError
from .files import dump, load
from .generator import generate
from .json_compat import from_json, to_json
from .literals import escape, unescape
from .model import OrtValue, ValueKind
from .parser import parse, parse_value

__all__ = [
    "parse",
    "parse_value",
    "generate",
    "load",
    "dump",
    "from_json",
    "to_json",
    "escape",
    "unescape",
    "OrtValue",
    "ValueKind",
    "OrtError",
    "OrtParseError",
    "OrtTypeError",
    "OrtKeyError",
    "OrtIndexError",
]
