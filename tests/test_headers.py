import pytest

from reqkit.headers import Header, HttpVersion


def test_lookup_ignores_case():
    header = Header({"Content-Type": "text/html"})
    assert header["content-type"] == "text/html"
    assert header["CONTENT-TYPE"] == "text/html"


def test_assignment_keeps_first_spelling():
    header = Header({"Content-Type": "text/html"})
    header["content-type"] = "application/json"
    assert list(header) == ["Content-Type"]
    assert header["Content-Type"] == "application/json"


def test_iteration_is_sorted_case_insensitively():
    header = Header({"b": "1", "A": "2", "c": "3"})
    assert list(header) == ["A", "b", "c"]


def test_missing_key_raises_and_get_has_default():
    header = Header()
    with pytest.raises(KeyError):
        header["content-type"]
    assert header.get("content-type", "") == ""


def test_delete_ignores_case():
    header = Header([("hello", "world"), ("key", "value")])
    del header["HELLO"]
    assert len(header) == 1
    assert "hello" not in header
    assert header["key"] == "value"


def test_duplicate_keys_in_constructor_keep_first():
    header = Header([("X-A", "1"), ("x-a", "2")])
    assert len(header) == 1
    assert header["x-a"] == "1"
    assert list(header) == ["X-A"]


def test_copy_from_other_header():
    source = Header({"hello": "world"})
    copy = Header(source)
    assert copy["Hello"] == "world"
    assert copy == source


def test_http_versions_are_distinct():
    assert len(list(HttpVersion)) == 2
    assert HttpVersion(HttpVersion.V1X.value) is HttpVersion.V1X
    assert HttpVersion(HttpVersion.V2.value) is HttpVersion.V2
    assert HttpVersion.V1X.value != HttpVersion.V2.value