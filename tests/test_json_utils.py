"""Tests for JSON utility functions."""

import json

from pytest import MonkeyPatch

from teiview import json_utils


def test_json_dumps_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using standard json when orjson is absent."""

    monkeypatch.setattr(json_utils, "orjson", None)
    data = {"a": "März"}
    assert json_utils.json_dumps(data) == json.dumps(data, ensure_ascii=False)


def test_json_dumps_indents_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Pretty-print with two spaces when asked."""

    monkeypatch.setattr(json_utils, "orjson", None)
    assert json_utils.json_dumps({"a": 1}, indent=True) == '{\n  "a": 1\n}'


def test_json_dumps_with_orjson(monkeypatch: MonkeyPatch) -> None:
    """Serialize using orjson when available."""

    class Fake:
        OPT_INDENT_2 = 1

        def dumps(
            self, obj: object, option: int = 0
        ) -> bytes:  # pragma: no cover - simple stub
            return b"{ }" if option else b"{}"

    monkeypatch.setattr(json_utils, "orjson", Fake())
    assert json_utils.json_dumps({}) == "{}"
    assert json_utils.json_dumps({}, indent=True) == "{ }"


def test_json_loads_without_orjson(monkeypatch: MonkeyPatch) -> None:
    """Deserialize JSON using standard json when orjson is absent."""

    monkeypatch.setattr(json_utils, "orjson", None)
    data = {"a": 1}
    text = json.dumps(data)
    assert json_utils.json_loads(text) == data
    assert json_utils.json_loads(text.encode()) == data


def test_json_loads_with_orjson(monkeypatch: MonkeyPatch) -> None:
    """Deserialize JSON using orjson when available."""

    class Fake:
        def loads(self, data: bytes) -> dict:  # pragma: no cover - simple stub
            return {"b": 2}

    monkeypatch.setattr(json_utils, "orjson", Fake())
    assert json_utils.json_loads(b"{}") == {"b": 2}
