"""Tests for the JSON bridge."""

import json

from ort_core import OrtValue, from_json, parse, to_json


def test_from_json_keeps_order():
    v = from_json('{"b": 1, "a": [true, null, "x"]}')
    assert list(v.to_native()) == ["b", "a"]
    assert v.get("a").get(0).as_bool() is True


def test_to_json_integral_numbers():
    assert json.loads(to_json(OrtValue({"n": 30, "f": 2.5}))) == {"n": 30, "f": 2.5}
    assert '"n": 30,' in to_json(OrtValue({"n": 30, "f": 2.5}))


def test_to_json_non_finite_becomes_null():
    assert to_json(OrtValue([float("inf"), float("nan")]), indent=None) == "[null, null]"


def test_to_json_bools_untouched():
    assert to_json(OrtValue([True, False]), indent=None) == "[true, false]"


def test_to_json_unicode():
    assert to_json(OrtValue("ünï"), indent=None) == '"ünï"'


def test_ort_to_json():
    text = "people:name,addr(street,city):\nAlice,(Main St,NYC)"
    assert json.loads(to_json(parse(text))) == {
        "people": [{"name": "Alice", "addr": {"street": "Main St", "city": "NYC"}}]
    }
