"""Simple request options: raw body, low-speed limit and redirect cap."""

from __future__ import annotations

from dataclasses import dataclass


class Body(str):
    """A raw request body sent as is."""


@dataclass(frozen=True)
class LowSpeed:
    """Abort when the transfer rate stays below ``limit`` bytes/s for ``time`` seconds."""

    limit: int
    time: int


@dataclass(frozen=True)
class MaxRedirects:
    """The greatest number of redirects to follow."""

    number_of_redirects: int