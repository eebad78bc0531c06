"""URL-encoded query parameters and form payloads."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeVar, Union
from urllib.parse import quote


def url_encode(value: str) -> str:
    """Percent-encode every character except unreserved ones (``A-Za-z0-9-_.~``)."""
    return quote(value, safe="")


@dataclass(frozen=True)
class Parameter:
    """A single query parameter; an empty value sends the key alone."""

    key: str
    value: str = ""


@dataclass(frozen=True)
class Pair:
    """A single form field of an URL-encoded payload."""

    key: str
    value: str


_T = TypeVar("_T", Parameter, Pair)


def _items(source) -> Iterable:
    return source.items() if isinstance(source, Mapping) else source


def _coerce(cls: type[_T], item) -> _T:
    return item if isinstance(item, cls) else cls(*item)


class Parameters:
    """Query string built from parameters, in the order they were added."""

    def __init__(
        self,
        parameters: Union[Iterable[Union[Parameter, tuple]], Mapping[str, str]] = (),
    ) -> None:
        self._content = ""
        for parameter in _items(parameters):
            self.add(parameter)

    def add(self, parameter: Union[Parameter, tuple]) -> None:
        """Append a parameter, encoding both its key and value."""
        parameter = _coerce(Parameter, parameter)
        encoded = url_encode(parameter.key)
        if parameter.value:
            encoded += "=" + url_encode(parameter.value)
        self._content = f"{self._content}&{encoded}" if self._content else encoded

    def __str__(self) -> str:
        return self._content

    def __repr__(self) -> str:
        return f"Parameters({self._content!r})"


class Payload:
    """URL-encoded form body; keys are sent as given, values are encoded."""

    def __init__(
        self, pairs: Union[Iterable[Union[Pair, tuple]], Mapping[str, str]] = ()
    ) -> None:
        self._content = ""
        for pair in _items(pairs):
            self.add(pair)

    def add(self, pair: Union[Pair, tuple]) -> None:
        """Append a field to the body."""
        pair = _coerce(Pair, pair)
        encoded = f"{pair.key}={url_encode(pair.value)}"
        self._content = f"{self._content}&{encoded}" if self._content else encoded

    def __str__(self) -> str:
        return self._content

    def __repr__(self) -> str:
        return f"Payload({self._content!r})"