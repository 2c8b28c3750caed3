"""
Test module for the class `JSONLikeFormat` of the `store`-subpackage.
"""

import pytest

from kv_store.store import SnapshotFormat, JSONLikeFormat


@pytest.fixture(name="fmt")
def _fmt():
    return JSONLikeFormat()


def test_interface_compliance():
    """
    Test whether `JSONLikeFormat` implements a `SnapshotFormat`.
    """
    assert issubclass(JSONLikeFormat, SnapshotFormat)


def test_dumps(fmt: JSONLikeFormat):
    """Test method `dumps` of class `JSONLikeFormat`."""
    assert (
        fmt.dumps([("key1", "value1"), ("key2", "value2")])
        == '{\n  "key1": "value1",\n  "key2": "value2"\n}\n'
    )


def test_dumps_empty(fmt: JSONLikeFormat):
    """Test method `dumps` of class `JSONLikeFormat` without entries."""
    assert fmt.dumps([]) == "{\n}\n"


def test_dumps_escaping(fmt: JSONLikeFormat):
    """Test escaping in method `dumps` of class `JSONLikeFormat`."""
    assert (
        fmt.dumps([('say "hi"', "C:\\temp")])
        == '{\n  "say \\"hi\\"": "C:\\\\temp"\n}\n'
    )


def test_loads(fmt: JSONLikeFormat):
    """Test method `loads` of class `JSONLikeFormat`."""
    assert fmt.loads(
        '{\n  "key1": "value1",\n  "key2": "value2"\n}\n'
    ) == {"key1": "value1", "key2": "value2"}


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ('"a": "b"', ("a", "b")),
        ('  "a":"b",  ', ("a", "b")),
        ('\t"a" : "b"\r', ("a", "b")),
        ('"a:b": "c:d"', ("a:b", "c:d")),
        ('"a": "b,"', ("a", "b,")),
        ('"a": ""', ("a", "")),
        ('"q\\"": "\\\\x\\n"', ('q"', "\\x\\n")),
        ("a: b,", ("a", "b")),
        ('"a": "b"c', ("a", 'b"c')),
        ('"a": "b', ("a", "b")),
        ('"a" "b"', None),
        ('"a": b', ("a", "b")),
        ('"k" : v,', ("k", "v")),
        ("{", None),
        (" } ", None),
        ("", None),
        ("no separator", None),
    ],
    ids=[
        "basic", "compact", "whitespace", "colon", "comma", "empty-value",
        "escapes", "bare", "trailing-garbage", "unterminated",
        "missing-colon", "unquoted-value", "unquoted-value-comma", "open",
        "close", "empty", "no-colon",
    ],
)
def test_parse_line(fmt: JSONLikeFormat, line, expected):
    """Test parsing of single lines by class `JSONLikeFormat`."""
    assert fmt._parse_line(line) == expected


def test_loads_partial_records(fmt: JSONLikeFormat):
    """
    Test method `loads` of class `JSONLikeFormat` with a line without
    separator (skipped) and an unterminated quote (split at `:`).
    """
    assert fmt.loads(
        '{\n  "a": "1",\n  garbage\n  "b": "2\n}\n'
    ) == {"a": "1", "b": "2"}


def test_round_trip_special_characters(fmt: JSONLikeFormat):
    """
    Test that values with quotes, backslashes, separators, and other
    line boundaries survive `dumps` and `loads`.
    """
    entries = {
        'quote"d': 'say "hi"',
        "back\\slash": "C:\\temp\\",
        "k:e,y": "a=b, c: d,",
        "sep": "x\x0by\u2028z",
        "": "empty key",
    }
    assert fmt.loads(fmt.dumps(entries.items())) == entries
