"""Parts of a multipart form submission."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class File:
    """A part whose content is read from a file on disk."""

    filepath: str


@dataclass(frozen=True)
class Buffer:
    """A part whose content is given in memory, uploaded under ``filename``."""

    data: bytes
    filename: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))


@dataclass
class Part:
    """One field of a multipart form."""

    name: str
    value: str
    content_type: str = ""
    data: Optional[bytes] = None
    is_file: bool = False
    is_buffer: bool = False

    @property
    def datalen(self) -> int:
        """Length of the in-memory content, zero when there is none."""
        return len(self.data) if self.data is not None else 0

    @classmethod
    def from_value(
        cls,
        name: str,
        value: Union[str, int, File, Buffer],
        content_type: str = "",
    ) -> "Part":
        """Build a part from a text, integer, file or buffer value."""
        if isinstance(value, File):
            return cls(name, value.filepath, content_type, is_file=True)
        if isinstance(value, Buffer):
            return cls(name, value.filename, content_type, data=value.data, is_buffer=True)
        if isinstance(value, str):
            return cls(name, value, content_type)
        if isinstance(value, int):
            return cls(name, str(int(value)), content_type)
        raise TypeError(f"unsupported part value type: {type(value).__name__}")


class Multipart:
    """An ordered collection of form parts."""

    def __init__(self, parts: Iterable[Union[Part, tuple]] = ()) -> None:
        self.parts: list[Part] = [
            part if isinstance(part, Part) else Part.from_value(*part) for part in parts
        ]

    def __iter__(self) -> Iterator[Part]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __repr__(self) -> str:
        return f"Multipart({self.parts!r})"