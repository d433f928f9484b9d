"""Tests for load/dump file wrappers."""

import pytest

from ort_core import OrtParseError, OrtValue, dump, load


def test_load(tmp_path):
    path = tmp_path / "users.ort"
    path.write_text("users:id,name:\n1,John\n2,Jöhn\n", encoding="utf-8")
    assert load(path) == {"users": [{"id": 1, "name": "John"}, {"id": 2, "name": "Jöhn"}]}


def test_load_str_path(tmp_path):
    path = tmp_path / "v.ort"
    path.write_text("n:\n5", encoding="utf-8")
    assert load(str(path)) == {"n": 5}


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load(tmp_path / "missing.ort")


def test_load_parse_error(tmp_path):
    path = tmp_path / "bad.ort"
    path.write_text(":a,b:\n1,2,3\n", encoding="utf-8")
    with pytest.raises(OrtParseError) as exc:
        load(path)
    assert exc.value.line_num == 2


def test_dump_native(tmp_path):
    path = tmp_path / "out.ort"
    dump({"tags": ["a", "b"]}, path)
    assert path.read_text(encoding="utf-8") == "tags:\n[a,b]"


def test_dump_value_then_load(tmp_path):
    path = tmp_path / "out.ort"
    value = OrtValue({"a": 1, "rows": [{"x": "é", "y": 2}, {"x": "ü", "y": 3}]})
    dump(value, path)
    assert load(path) == value
