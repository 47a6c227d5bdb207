"""Persistence layer for activity events."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from download_activity.domain.entities import (
    ActivityEvent,
    ActivityKind,
    ObjectReference,
    SubjectKey,
    SubjectParameters,
)
from download_activity.infrastructure.models import ActivityEventModel
from download_activity.utils import ensure_app_naive_datetime, ensure_app_timezone

logger = logging.getLogger(__name__)


class ActivityEventRepository:
    """Store published events and read them back newest first."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def publish(self, event: ActivityEvent) -> ActivityEvent:
        model = ActivityEventModel()
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        logger.debug(
            "Stored %s activity %s for %s", model.type, model.id, model.affected_user
        )
        return self._to_entity(model)

    def get(self, event_id: int) -> ActivityEvent | None:
        model = self.session.get(ActivityEventModel, event_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list_for_user(
        self,
        user_id: str,
        *,
        object_type: str | None = None,
        object_id: int | None = None,
        limit: int | None = 50,
        offset: int = 0,
    ) -> Sequence[ActivityEvent]:
        """Return the events affecting ``user_id`` in timestamp-descending order.

        Passing ``object_type`` and ``object_id`` restricts the feed to a single
        resource. Records whose parameters cannot be decoded are skipped.
        """

        query = self.session.query(ActivityEventModel).filter(
            ActivityEventModel.affected_user == user_id
        )
        if object_type is not None:
            query = query.filter(ActivityEventModel.object_type == object_type)
        if object_id is not None:
            query = query.filter(ActivityEventModel.object_id == object_id)
        query = query.order_by(
            ActivityEventModel.timestamp.desc(), ActivityEventModel.id.desc()
        )
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        events: list[ActivityEvent] = []
        for model in query.all():
            try:
                events.append(self._to_entity(model))
            except (TypeError, ValueError):
                logger.warning("Skipping activity %s with malformed parameters", model.id)
                continue
        return events

    @staticmethod
    def _apply_entity_to_model(model: ActivityEventModel, event: ActivityEvent) -> None:
        model.app = event.app_id
        model.type = _enum_value(event.kind)
        model.affected_user = event.affected_user
        model.author = event.author
        model.timestamp = ensure_app_naive_datetime(event.timestamp)
        model.subject = _enum_value(event.subject_key)
        model.subject_params = event.subject_params.to_list()
        model.object_type = event.object_ref.type
        model.object_id = event.object_ref.resource_id
        model.object_name = event.object_ref.name
        model.link = event.link

    @staticmethod
    def _to_entity(model: ActivityEventModel) -> ActivityEvent:
        return ActivityEvent(
            id=model.id,
            app_id=model.app,
            kind=_parse_enum(ActivityKind, model.type),
            affected_user=model.affected_user,
            author=model.author,
            timestamp=ensure_app_timezone(model.timestamp),
            subject_key=_parse_enum(SubjectKey, model.subject),
            subject_params=SubjectParameters.from_list(model.subject_params or []),
            object_ref=ObjectReference(
                type=model.object_type,
                resource_id=model.object_id,
                name=model.object_name,
            ),
            link=model.link,
        )


def _enum_value(value: object) -> str:
    return str(getattr(value, "value", value))


def _parse_enum(enum_type, value: str):
    try:
        return enum_type(value)
    except ValueError:
        return value


__all__ = ["ActivityEventRepository"]
