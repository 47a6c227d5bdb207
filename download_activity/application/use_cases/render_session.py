"""State that lives for exactly one pass over an activity feed."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from download_activity.domain.entities import ClientKind


class DisplayNameService(Protocol):
    def get_display_name(self, uid: str) -> str: ...


def _untranslated(text: str) -> str:
    return text


@dataclass
class RenderSession:
    """Caches and merge state for one user's view of one feed page.

    Create a new session for every render pass; sessions must not be shared
    between users, pages or concurrent renders.
    """

    display_name_service: DisplayNameService
    translate: Callable[[str], str] = _untranslated
    display_names: dict[str, str] = field(default_factory=dict)
    last_client_kind: ClientKind | None = None

    def display_name(self, uid: str) -> str:
        """Return the display name of ``uid``, looking it up once per session."""

        if uid not in self.display_names:
            self.display_names[uid] = self.display_name_service.get_display_name(uid)
        return self.display_names[uid]


__all__ = ["DisplayNameService", "RenderSession"]
