"""Domain entity carrying the request metadata of one file access."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RequestContext:
    """User agent, query parameters and path info of the triggering request."""

    user_agent: str = ""
    query: Mapping[str, str] = field(default_factory=dict)
    path_info: str = ""

    def has_param(self, name: str) -> bool:
        return name in self.query

    def get_param(self, name: str, default: str = "") -> str:
        value = self.query.get(name)
        return default if value is None else str(value)


__all__ = ["RequestContext"]
