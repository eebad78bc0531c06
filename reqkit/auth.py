"""Credentials for HTTP basic and digest authentication."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Authentication:
    """A user name and password pair used for basic authentication."""

    username: str
    password: str

    @property
    def auth_string(self) -> str:
        """The credentials in ``user:password`` form."""
        return f"{self.username}:{self.password}"


@dataclass(frozen=True)
class Digest(Authentication):
    """Credentials to be sent using HTTP digest authentication."""