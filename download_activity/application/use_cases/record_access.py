"""Use case recording a file read as a download activity."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Protocol

from sqlalchemy.orm import Session

from download_activity.config import Settings, get_settings
from download_activity.domain.entities import (
    ActivityEvent,
    CurrentUser,
    RequestContext,
    SubjectParameters,
)
from download_activity.domain.exceptions import InvalidEvent, InvalidPath, NotFound
from download_activity.infrastructure.repositories import (
    ActivityEventRepository,
    NodeRepository,
)
from download_activity.infrastructure.url_builder import UrlBuilder

from .access_classification import AccessClassifier
from .event_builder import EventBuilder
from .owner_resolution import NodeStore, OwnerResolver

logger = logging.getLogger(__name__)


class EventStore(Protocol):
    def publish(self, event: ActivityEvent) -> ActivityEvent: ...


class DownloadActivityListener:
    """Turn read notifications into published activity events.

    Failures never reach the caller: unresolvable nodes and invalid events are
    logged and the notification is dropped.
    """

    def __init__(
        self,
        node_store: NodeStore,
        event_store: EventStore,
        *,
        url_builder: UrlBuilder | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.event_store = event_store
        self.url_builder = url_builder or UrlBuilder(self.settings.base_url)
        self.resolver = OwnerResolver(node_store)
        self.classifier = AccessClassifier(self.settings)
        self.builder = EventBuilder()

    def read_file(
        self,
        current_user: CurrentUser,
        path: str,
        request: RequestContext,
        *,
        timestamp: datetime | None = None,
    ) -> ActivityEvent | None:
        """Record the read of ``path`` and return the published event, if any."""

        if path.endswith(self.settings.partial_upload_suffix):
            return None

        if not current_user.is_logged_in:
            logger.info("Skipping anonymous read of %s, public link downloads are tracked elsewhere", path)
            return None

        try:
            owner_info = self.resolver.resolve(current_user.uid, path)
        except (NotFound, InvalidPath):
            logger.exception("Could not resolve the owner of %s", path)
            return None

        if not owner_info.owner:
            logger.info("No owner found for %s", path)
            return None

        is_self_access = current_user.uid == owner_info.owner
        client_kind = self.classifier.detect_client_kind(request.user_agent)
        subject_params = SubjectParameters(
            file_ref={owner_info.resource_id: owner_info.path},
            actor_id=current_user.identifier,
            client_kind=client_kind,
        )

        classification = self.classifier.classify(
            owner_info, current_user.uid, is_self_access, request
        )
        if classification is None:
            return None

        link = self.url_builder.link_to_files_view(**classification.link_hints)
        try:
            event = self.builder.build(
                owner_info,
                current_user.uid,
                classification.kind,
                classification.subject_key,
                subject_params,
                link,
                timestamp=timestamp,
            )
        except InvalidEvent:
            logger.exception("Could not build the activity for %s", path)
            return None

        return self.event_store.publish(event)


def record_file_access(
    session: Session,
    *,
    current_user: CurrentUser,
    path: str,
    request: RequestContext,
    timestamp: datetime | None = None,
    settings: Settings | None = None,
) -> ActivityEvent | None:
    """Record a read of ``path`` by ``current_user`` using the database stores."""

    listener = DownloadActivityListener(
        NodeRepository(session),
        ActivityEventRepository(session),
        settings=settings,
    )
    return listener.read_file(current_user, path, request, timestamp=timestamp)


__all__ = ["DownloadActivityListener", "EventStore", "record_file_access"]
