import dataclasses

import pytest

from reqkit.options import Body, LowSpeed, MaxRedirects


def test_body_holds_text():
    body = Body("x=5")
    assert body == "x=5"
    assert isinstance(body, str)


def test_empty_body():
    assert Body() == ""
    assert len(Body()) == 0


def test_body_concatenates_like_a_string():
    assert Body("x=5") + "&y=13" == "x=5&y=13"


def test_low_speed_fields():
    low_speed = LowSpeed(1, 1)
    assert (low_speed.limit, low_speed.time) == (1, 1)
    assert low_speed == LowSpeed(limit=1, time=1)


def test_max_redirects_fields_and_immutability():
    redirects = MaxRedirects(2)
    assert redirects.number_of_redirects == 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        redirects.number_of_redirects = 3