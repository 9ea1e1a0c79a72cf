import json
from datetime import datetime

import pytest

from workflow_data import MemoryStore, dumps_json, read_json, write_html, write_json


def test_write_json_is_pretty():
    store = MemoryStore()
    write_json("cfg.json", {"port": 3000, "debug": True}, store=store)
    assert store.files["cfg.json"].decode("utf-8") == '{\n  "port": 3000,\n  "debug": true\n}'


def test_round_trip():
    store = MemoryStore()
    value = {"rows": [{"a": 1}, {"a": None}], "name": "café"}
    write_json("data.json", value, store=store)
    assert read_json("data.json", store=store) == value


def test_dates_are_written_as_iso_text():
    assert json.loads(dumps_json({"at": datetime(2024, 1, 2, 3, 4, 5)})) == {"at": "2024-01-02T03:04:05"}


def test_unserializable_value_fails():
    with pytest.raises(TypeError):
        write_json("x.json", {"x": object()}, store=MemoryStore())


def test_invalid_json_fails_with_path():
    store = MemoryStore({"broken.json": b"{ invalid json"})
    with pytest.raises(json.JSONDecodeError) as excinfo:
        read_json("broken.json", store=store)
    assert "broken.json" in "".join(excinfo.value.__notes__)


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        read_json("nonexistent.json", store=MemoryStore())


def test_write_html_verbatim(tmp_path):
    html = "<html><body><h1>Test</h1></body></html>"
    path = tmp_path / "page.html"
    write_html(path, html)
    assert path.read_text(encoding="utf-8") == html
