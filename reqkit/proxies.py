"""Proxy hosts selected by URL scheme."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Union


class Proxies:
    """Proxy host for each protocol."""

    def __init__(
        self,
        hosts: Union[Mapping[str, str], Iterable[tuple[str, str]], None] = None,
    ) -> None:
        self._hosts: dict[str, str] = {}
        if hosts is None:
            return
        items = hosts.items() if isinstance(hosts, Mapping) else hosts
        for protocol, host in items:
            self._hosts.setdefault(protocol, host)

    def has(self, protocol: str) -> bool:
        """Whether a proxy is configured for ``protocol``."""
        return protocol in self._hosts

    def __getitem__(self, protocol: str) -> str:
        return self._hosts[protocol]

    def __repr__(self) -> str:
        return f"Proxies({self._hosts!r})"