"""Use case rendering a user's stored download activities as a feed."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from sqlalchemy.orm import Session

from download_activity.config import Settings, get_settings
from download_activity.domain.entities import ActivityEvent, RenderedEvent
from download_activity.infrastructure.event_merger import EventMergePrimitive
from download_activity.infrastructure.repositories import (
    ActivityEventRepository,
    UserRepository,
)
from download_activity.infrastructure.url_builder import UrlBuilder

from .event_merging import EventMerger
from .render_session import RenderSession
from .subject_rendering import RenderMode, SubjectRenderer

logger = logging.getLogger(__name__)


class DownloadActivityProvider:
    """Render one event and fold it into the entry rendered just before it."""

    def __init__(self, renderer: SubjectRenderer, merger: EventMerger) -> None:
        self.renderer = renderer
        self.merger = merger

    def parse(
        self,
        event: ActivityEvent,
        session: RenderSession,
        previous: RenderedEvent | None = None,
        mode: RenderMode = RenderMode.LONG,
    ) -> RenderedEvent:
        rendered = self.renderer.render(event, session, mode)
        return self.merger.merge_if_eligible(rendered, previous, session, mode)


def _append_entry(feed: list[RenderedEvent], entry: RenderedEvent) -> None:
    # A grouped entry replaces the entry it absorbed.
    if entry.child_event is not None and feed and feed[-1] is entry.child_event:
        feed.pop()
    feed.append(entry)


def render_events(
    events: Iterable[ActivityEvent],
    provider: DownloadActivityProvider,
    session: RenderSession,
    mode: RenderMode = RenderMode.LONG,
) -> list[RenderedEvent]:
    """Render ``events`` (newest first) into grouped feed entries.

    An event that cannot be rendered is logged and left out.
    """

    feed: list[RenderedEvent] = []
    previous: RenderedEvent | None = None
    for event in events:
        try:
            rendered = provider.parse(event, session, previous, mode)
        except (ValueError, LookupError):
            logger.exception("Skipping activity %s that could not be rendered", event.id)
            continue
        _append_entry(feed, rendered)
        previous = rendered
    return feed


def group_rendered_events(
    entries: Iterable[RenderedEvent],
    merger: EventMerger,
    session: RenderSession,
    mode: RenderMode = RenderMode.LONG,
) -> list[RenderedEvent]:
    """Run the merger over already rendered entries, newest first."""

    grouped: list[RenderedEvent] = []
    previous: RenderedEvent | None = None
    for entry in entries:
        merged = merger.merge_if_eligible(entry, previous, session, mode)
        _append_entry(grouped, merged)
        previous = merged
    return grouped


def render_activity_feed(
    session: Session,
    *,
    user_id: str,
    object_type: str | None = None,
    object_id: int | None = None,
    limit: int = 50,
    offset: int = 0,
    translate: Callable[[str], str] | None = None,
    settings: Settings | None = None,
) -> list[RenderedEvent]:
    """Return the rendered activity feed of ``user_id``.

    Filtering the feed to one object switches to the short sentences used in a
    file's own activity list.
    """

    settings = settings or get_settings()
    events = ActivityEventRepository(session).list_for_user(
        user_id,
        object_type=object_type,
        object_id=object_id,
        limit=limit,
        offset=offset,
    )

    render_session = RenderSession(display_name_service=UserRepository(session))
    if translate is not None:
        render_session.translate = translate

    provider = DownloadActivityProvider(
        SubjectRenderer(UrlBuilder(settings.base_url), settings),
        EventMerger(
            EventMergePrimitive(translate=render_session.translate, settings=settings)
        ),
    )
    mode = RenderMode.SHORT if object_id is not None else RenderMode.LONG
    return render_events(events, provider, render_session, mode)


__all__ = [
    "DownloadActivityProvider",
    "group_rendered_events",
    "render_activity_feed",
    "render_events",
]
