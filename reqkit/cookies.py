"""Cookie collection encoded into a ``Cookie`` header value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Union

from reqkit.forms import url_encode


def _is_quoted(value: str) -> bool:
    return bool(value) and value[0] == '"' and value[-1] == '"'


class Cookies(MutableMapping[str, str]):
    """Cookies keyed by name and iterated in name order."""

    def __init__(
        self,
        pairs: Union[Mapping[str, str], Iterable[tuple[str, str]], None] = None,
    ) -> None:
        self._map: dict[str, str] = {}
        if pairs is None:
            return
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for key, value in items:
            self._map.setdefault(key, value)

    def __getitem__(self, key: str) -> str:
        return self._map[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._map[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self._map:
            raise KeyError(key)
        self._map.pop(key)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._map))

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"Cookies({dict(self.items())!r})"

    def encoded(self) -> str:
        """Return ``name=value; `` for each cookie, URL-encoded.

        Values wrapped in double quotes (version 1 cookies) are sent as is.
        """
        return "".join(
            f"{url_encode(key)}={value if _is_quoted(value) else url_encode(value)}; "
            for key, value in self.items()
        )