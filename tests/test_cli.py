"""Tests for the ort2json / json2ort command-line converters."""

import json
from pathlib import Path

import pytest

from ort_core import parse
from ort_core.cli import json2ort, main, ort2json, output_path


# ---------------------------------------------------------------------------
# output_path
# ---------------------------------------------------------------------------

def test_output_path_next_to_input():
    assert output_path(Path("data/a.ort"), None, ".json") == Path("data/a.json")

def test_output_path_in_dir():
    assert output_path(Path("data/a.ort"), Path("out"), ".json") == Path("out/a.json")


# ---------------------------------------------------------------------------
# ort2json
# ---------------------------------------------------------------------------

def test_ort2json(tmp_path):
    src = tmp_path / "users.ort"
    src.write_text("users:id,name:\n1,John\n2,Jane\n", encoding="utf-8")
    assert ort2json([str(src)]) == 0
    data = json.loads((tmp_path / "users.json").read_text(encoding="utf-8"))
    assert data == {"users": [{"id": 1, "name": "John"}, {"id": 2, "name": "Jane"}]}

def test_ort2json_output_dir(tmp_path):
    src = tmp_path / "v.ort"
    src.write_text("n:\n5", encoding="utf-8")
    out = tmp_path / "out"
    assert ort2json([str(src), "-o", str(out)]) == 0
    assert json.loads((out / "v.json").read_text(encoding="utf-8")) == {"n": 5}

def test_ort2json_parse_error(tmp_path, capsys):
    src = tmp_path / "bad.ort"
    src.write_text(":a,b:\n1,2,3\n", encoding="utf-8")
    assert ort2json([str(src)]) == 1
    err = capsys.readouterr().err
    assert "Line 2" in err
    assert "Expected 2 values but got 3" in err
    assert not (tmp_path / "bad.json").exists()

def test_ort2json_missing_file(tmp_path, capsys):
    assert ort2json([str(tmp_path / "nope.ort")]) == 1
    assert "Failed to read file" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# json2ort
# ---------------------------------------------------------------------------

def test_json2ort(tmp_path):
    src = tmp_path / "people.json"
    src.write_text(json.dumps({"people": [{"name": "A", "age": 1}, {"name": "B", "age": 2}]}),
                   encoding="utf-8")
    assert json2ort([str(src)]) == 0
    text = (tmp_path / "people.ort").read_text(encoding="utf-8")
    assert text == "people:name,age:\nA,1\nB,2"
    assert parse(text) == {"people": [{"name": "A", "age": 1}, {"name": "B", "age": 2}]}

def test_json2ort_invalid_json(tmp_path, capsys):
    src = tmp_path / "bad.json"
    src.write_text("{not json", encoding="utf-8")
    assert json2ort([str(src)]) == 1
    assert "Failed to parse JSON" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def test_main_usage(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["ort_core.cli"])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 2
    assert "Usage" in capsys.readouterr().err

def test_main_dispatch(monkeypatch, tmp_path):
    src = tmp_path / "v.json"
    src.write_text("[1, 2]", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["ort_core.cli", "json2ort", str(src)])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 0
    assert (tmp_path / "v.ort").read_text(encoding="utf-8") == ":[1,2]"
