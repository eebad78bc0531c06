import dataclasses

import pytest

from reqkit.auth import Authentication, Digest


def test_auth_string_joins_user_and_password():
    auth = Authentication("user", "password")
    assert auth.auth_string == "user:password"


def test_auth_string_splits_back_into_parts():
    auth = Authentication("user", "password")
    assert auth.auth_string.split(":", 1) == ["user", "password"]


def test_keyword_construction_keeps_fields():
    password = "password"
    auth = Authentication(username="user", password=password)
    assert auth.username == "user"
    assert auth.password == password


def test_digest_is_an_authentication_with_same_string():
    digest = Digest("user", "password")
    assert isinstance(digest, Authentication)
    assert digest.auth_string == Authentication("user", "password").auth_string


def test_credentials_are_immutable():
    auth = Authentication("user", "password")
    with pytest.raises(dataclasses.FrozenInstanceError):
        auth.username = "other"
    assert auth.username == "user"
    assert auth.auth_string == "user:password"


def test_empty_credentials_give_lone_colon():
    assert Authentication("", "").auth_string == ":"