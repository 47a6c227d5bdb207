"""Render-time view of an activity event."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .activity_event import ActivityEvent, ClientKind
from .parameters import RichParameter


@dataclass
class RichSubject:
    """A subject template together with the values of its placeholders."""

    template: str
    parameters: dict[str, RichParameter] = field(default_factory=dict)


@dataclass
class RenderedEvent:
    """An activity as displayed in the feed.

    A grouped entry keeps the entry it absorbed in ``child_event``; its
    ``timestamp`` is the newest timestamp of the group.
    """

    event: ActivityEvent
    parsed_subject: str
    rich_subject: RichSubject
    timestamp: datetime
    icon: str | None = None
    child_event: "RenderedEvent | None" = None

    @property
    def app_id(self) -> str:
        return self.event.app_id

    @property
    def kind(self) -> str:
        return str(getattr(self.event.kind, "value", self.event.kind))

    @property
    def subject_key(self) -> str:
        return str(getattr(self.event.subject_key, "value", self.event.subject_key))

    @property
    def client_kind(self) -> ClientKind:
        return self.event.subject_params.client_kind

    def group_size(self) -> int:
        """Return how many stored events this entry represents."""

        size = 1
        child = self.child_event
        while child is not None:
            size += 1
            child = child.child_event
        return size


__all__ = ["RenderedEvent", "RichSubject"]
