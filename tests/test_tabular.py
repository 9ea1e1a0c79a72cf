from datetime import date

import pytest

from workflow_data import (
    EmptyTableError,
    MalformedRowError,
    MemoryStore,
    decode_bytes,
    parse_csv,
    read_csv,
    render_csv,
    write_csv,
)
from workflow_data.values import coerce_value


def test_parse_header_and_numbers():
    assert parse_csv("Name,Age\nAlice,30\nBob,25") == [
        {"Name": "Alice", "Age": 30},
        {"Name": "Bob", "Age": 25},
    ]


def test_parse_trims_names_and_values():
    assert parse_csv("  Name , Score \n Alice ,  1.5 \n") == [{"Name": "Alice", "Score": 1.5}]


def test_parse_empty_text():
    assert parse_csv("") == []
    assert parse_csv("Name,Age\n") == []


def test_short_row_is_rejected_not_padded():
    with pytest.raises(MalformedRowError) as excinfo:
        parse_csv("Name,Age\nAlice\nBob,25")
    err = excinfo.value
    assert (err.line_number, err.found, err.expected) == (2, 1, 2)
    assert str(err) == "Row 2 has 1 columns; expected 2."


def test_long_row_is_rejected():
    with pytest.raises(MalformedRowError, match="Row 3 has 3 columns; expected 2"):
        parse_csv("a,b\n1,2\n1,2,3\n")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-7", -7),
        ("+3", 3),
        ("2.50", 2.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("02134", 2134),
        ("abc", "abc"),
        ("12abc", "12abc"),
        ("1_000", "1_000"),
        ("nan", "nan"),
        ("1e400", "1e400"),
        ("", ""),
        ("0x1F", "0x1F"),
    ],
)
def test_coerce_value(text, expected):
    result = coerce_value(text)
    assert result == expected
    assert type(result) is type(expected)


def test_render_quotes_every_value():
    content = render_csv([{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}])
    lines = content.split("\n")
    assert lines == ["id,name", '"1","Alice"', '"2","Bob"']


def test_render_escapes_delimiters_and_quotes():
    content = render_csv([{"note": 'says "hi", then leaves'}])
    assert content.split("\n")[1] == '"says ""hi"", then leaves"'


def test_render_cells():
    content = render_csv([{"a": None, "b": True, "c": date(2024, 1, 31)}, {"a": 1}])
    assert content.split("\n")[1:] == ['"","true","2024-01-31"', '"1","",""']


def test_render_empty_fails():
    with pytest.raises(EmptyTableError):
        render_csv([])


def test_round_trip_keeps_types():
    records = [
        {"id": 1, "name": "Alice, Jr.", "score": 9.5},
        {"id": 2, "name": 'The "Bob"', "score": -3},
    ]
    assert parse_csv(render_csv(records)) == records
    assert isinstance(parse_csv(render_csv(records))[1]["score"], int)


def test_decode_utf8_with_bom_and_crlf():
    decoded = decode_bytes(b"\xef\xbb\xbfa,b\r\n1,2\r\n")
    assert decoded.text == "a,b\n1,2\n"
    assert decoded.fallback is False


def test_decode_non_utf8():
    decoded = decode_bytes("name\nMontréal déjà vu, café crème\n".encode("latin-1"))
    assert "Montréal" in decoded.text


def test_read_and_write_through_memory_store():
    store = MemoryStore()
    write_csv("out.csv", [{"id": 1, "name": "Alice"}], store=store)
    assert store.files["out.csv"] == b'id,name\n"1","Alice"'
    assert read_csv("out.csv", store=store) == [{"id": 1, "name": "Alice"}]


def test_read_missing_file_carries_path():
    with pytest.raises(FileNotFoundError) as excinfo:
        read_csv("nonexistent.csv", store=MemoryStore())
    assert "nonexistent.csv" in "".join(excinfo.value.__notes__)


def test_read_malformed_file_carries_path():
    store = MemoryStore({"bad.csv": b"Name,Age\nAlice\nBob,25"})
    with pytest.raises(MalformedRowError) as excinfo:
        read_csv("bad.csv", store=store)
    assert "bad.csv" in "".join(excinfo.value.__notes__)


def test_local_files(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("Name,Age\nAlice,30\n", encoding="utf-8")
    records = read_csv(path)
    records.append({"Name": "Bob", "Age": 25})
    write_csv(tmp_path / "copy.csv", records)
    assert read_csv(tmp_path / "copy.csv") == [
        {"Name": "Alice", "Age": 30},
        {"Name": "Bob", "Age": 25},
    ]


def test_decode_falls_back_to_replacement(monkeypatch):
    from types import SimpleNamespace

    from workflow_data import tabular

    monkeypatch.setattr(tabular, "from_bytes", lambda raw: SimpleNamespace(best=lambda: None))
    decoded = decode_bytes(b"name\nab\xffc\n")
    assert decoded.fallback is True
    assert decoded.encoding == "utf-8"
    assert decoded.text == "name\nab�c\n"


def test_overflowing_number_stays_text():
    assert parse_csv("a\n1e400") == [{"a": "1e400"}]
