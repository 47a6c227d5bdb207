"""Group consecutive feed entries produced through the same channel."""

from __future__ import annotations

import logging
from typing import Protocol

from download_activity.domain.entities import RenderedEvent

from .render_session import RenderSession
from .subject_rendering import RenderMode

logger = logging.getLogger(__name__)


class MergePrimitive(Protocol):
    def merge_events(
        self, key: str, event: RenderedEvent, previous: RenderedEvent | None
    ) -> RenderedEvent: ...


class EventMerger:
    """Choose the merge keys for a rendered entry and track the last client kind.

    Input must arrive newest first; only adjacent entries are compared.
    """

    def __init__(self, merge_primitive: MergePrimitive) -> None:
        self.merge_primitive = merge_primitive

    def merge_if_eligible(
        self,
        rendered: RenderedEvent,
        previous: RenderedEvent | None,
        session: RenderSession,
        mode: RenderMode,
    ) -> RenderedEvent:
        client_kind = rendered.client_kind
        if rendered.child_event is not None:
            # Groups are never merged again.
            session.last_client_kind = client_kind
            return rendered
        if session.last_client_kind is not client_kind:
            session.last_client_kind = client_kind
            return rendered

        merged = self.merge_primitive.merge_events("actor", rendered, previous)
        if mode is RenderMode.LONG and merged.child_event is None:
            merged = self.merge_primitive.merge_events("file", merged, previous)
        return merged


__all__ = ["EventMerger", "MergePrimitive"]
