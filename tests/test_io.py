"""Tests for the file helpers."""

import pytest

from imetext.io import ResourceLoadError, count_lines, iter_lines, load_json


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"one\ntwo\n", ["one", "two"]),
        (b"one\r\ntwo", ["one", "two"]),
        (b"one\rtwo\r", ["one", "two"]),
        (b"", []),
    ],
)
def test_count_matches_iteration(tmp_path, data, expected):
    path = tmp_path / "lines.txt"
    path.write_bytes(data)
    assert list(iter_lines(path)) == expected
    assert count_lines(path) == len(expected)


def test_iter_lines_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9 Hello\n")
    with pytest.raises(ResourceLoadError, match="not valid UTF-8"):
        list(iter_lines(path))
    with pytest.raises(ResourceLoadError, match="not valid UTF-8"):
        count_lines(path)


def test_load_json_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "resources.json"
    path.write_bytes(b'{"resources": {"caf\xe9": {}}}')
    with pytest.raises(ResourceLoadError, match="not valid UTF-8"):
        load_json(path)


def test_missing_file(tmp_path):
    with pytest.raises(ResourceLoadError, match="Failed to read"):
        count_lines(tmp_path / "missing.txt")
