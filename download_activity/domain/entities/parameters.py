"""Rich subject parameters produced while rendering an activity."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class FileParameter:
    """A file placeholder value."""

    id: int
    name: str
    path: str
    link: str
    type: str = "file"

    def display_text(self) -> str:
        return self.path

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class UserParameter:
    """A user placeholder value."""

    id: str
    name: str
    type: str = "user"

    def display_text(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


RichParameter = FileParameter | UserParameter


__all__ = ["FileParameter", "RichParameter", "UserParameter"]
