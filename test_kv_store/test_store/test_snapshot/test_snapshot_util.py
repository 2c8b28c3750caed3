"""
Test module for the utility functions of the snapshot-subpackage.
"""

import pytest

from kv_store.store import (
    JSONLikeFormat, LineFormat, load_format, detect_format
)


@pytest.mark.parametrize(
    ("name", "cls"),
    [("json", JSONLikeFormat), ("lines", LineFormat)],
)
def test_load_format(name, cls):
    """Test function `load_format`."""
    assert isinstance(load_format(name), cls)


def test_load_format_unknown():
    """Test function `load_format` for unknown format."""
    with pytest.raises(ValueError) as exc_info:
        load_format("yaml")
    assert "json" in str(exc_info.value)
    assert "lines" in str(exc_info.value)


@pytest.mark.parametrize(
    ("text", "cls"),
    [
        ('{\n  "a": "b"\n}\n', JSONLikeFormat),
        ("\n  \n {\r\n}\n", JSONLikeFormat),
        ("{\n}\n", JSONLikeFormat),
        ("a=b\n", LineFormat),
        ("{a=b\n", LineFormat),
        ("", LineFormat),
    ],
    ids=["json", "leading-blank", "json-empty", "lines", "brace-key", "empty"],
)
def test_detect_format(text, cls):
    """Test function `detect_format`."""
    assert isinstance(detect_format(text), cls)
