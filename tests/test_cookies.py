from urllib.parse import unquote

import pytest

from reqkit.cookies import Cookies


def test_encoded_is_sorted_by_name():
    cookies = Cookies({"b": "2", "a": "1"})
    assert cookies.encoded() == "a=1; b=2; "


def test_value_is_url_encoded():
    value = "another; fake=cookie;"
    encoded = Cookies({"my": value}).encoded()
    assert encoded.startswith("my=")
    assert encoded.endswith("; ")
    body = encoded[len("my="):-len("; ")]
    assert ";" not in body
    assert unquote(body) == value


def test_quoted_value_is_kept_as_is():
    assert Cookies({"v": '"a b"'}).encoded() == 'v="a b"; '


def test_empty_collection_encodes_to_nothing():
    assert Cookies().encoded() == ""


def test_set_get_delete():
    cookies = Cookies()
    cookies["hello"] = "world"
    cookies["my"] = "value"
    assert cookies["hello"] == "world"
    assert len(cookies) == 2
    del cookies["hello"]
    assert list(cookies) == ["my"]


def test_missing_cookie_raises_key_error():
    with pytest.raises(KeyError):
        Cookies()["cookie"]


def test_duplicate_pairs_keep_first():
    cookies = Cookies([("hello", "world"), ("hello", "other")])
    assert cookies["hello"] == "world"
    assert len(cookies) == 1


def test_copy_round_trip():
    original = Cookies([("hello", "world"), ("my", "another; fake=cookie;")])
    assert Cookies(original) == original
    assert Cookies(original).encoded() == original.encoded()