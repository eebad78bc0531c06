"""Case-insensitive HTTP header mapping and protocol versions."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from enum import Enum
from typing import Union

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(key: str) -> str:
    return key.translate(_ASCII_LOWER)


class Header(MutableMapping[str, str]):
    """Header fields keyed case-insensitively and iterated in folded order.

    The spelling of a key is the one it was first stored with; later
    assignments under another spelling only replace the value.
    """

    def __init__(
        self,
        data: Union[Mapping[str, str], Iterable[tuple[str, str]], None] = None,
    ) -> None:
        self._store: dict[str, tuple[str, str]] = {}
        if data is None:
            return
        items = data.items() if isinstance(data, Mapping) else data
        for key, value in items:
            self._store.setdefault(_fold(key), (key, value))

    def __getitem__(self, key: str) -> str:
        return self._store[_fold(key)][1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = _fold(key)
        original = self._store.get(folded, (key, value))[0]
        self._store[folded] = (original, value)

    def __delitem__(self, key: str) -> None:
        del self._store[_fold(key)]

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._store):
            yield self._store[folded][0]

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"


class HttpVersion(Enum):
    """HTTP protocol version to request."""

    V1X = "1.x"
    V2 = "2"