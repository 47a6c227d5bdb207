"""Assemble validated activity events."""

from __future__ import annotations

from datetime import datetime

from download_activity import APP_ID
from download_activity.domain.entities import (
    ActivityEvent,
    ActivityKind,
    ObjectReference,
    OwnerInfo,
    SubjectKey,
    SubjectParameters,
    is_consistent,
)
from download_activity.domain.exceptions import InvalidEvent
from download_activity.utils import ensure_app_timezone, now_in_app_timezone

_MAX_APP_LENGTH = 32
_MAX_TYPE_LENGTH = 255
_MAX_USER_LENGTH = 64
_MAX_SUBJECT_LENGTH = 255
_MAX_TEXT_LENGTH = 4000


def _ensure_length(field: str, value: str, limit: int) -> None:
    if len(value) > limit:
        msg = f"Activity {field} exceeds the maximum length of {limit} characters"
        raise InvalidEvent(msg)


class EventBuilder:
    """Build the immutable :class:`ActivityEvent` for one classified access."""

    def __init__(self, app_id: str = APP_ID) -> None:
        self.app_id = app_id

    def build(
        self,
        owner_info: OwnerInfo,
        actor: str,
        kind: ActivityKind,
        subject_key: SubjectKey,
        subject_params: SubjectParameters,
        link: str,
        timestamp: datetime | None = None,
    ) -> ActivityEvent:
        """Return the event or raise :class:`InvalidEvent` when a field is unusable."""

        if not self.app_id:
            raise InvalidEvent("App not set")
        if not isinstance(kind, ActivityKind):
            raise InvalidEvent("Type not set")
        if not isinstance(subject_key, SubjectKey):
            raise InvalidEvent("Subject not set")
        if not owner_info.owner:
            raise InvalidEvent("Affected user not set")
        if not is_consistent(kind, subject_key):
            msg = f"Subject '{subject_key.value}' cannot describe a '{kind.value}' activity"
            raise InvalidEvent(msg)
        if subject_params.resource_id != owner_info.resource_id:
            msg = (
                f"Subject file {subject_params.resource_id} does not match "
                f"object {owner_info.resource_id}"
            )
            raise InvalidEvent(msg)

        _ensure_length("app", self.app_id, _MAX_APP_LENGTH)
        _ensure_length("type", kind.value, _MAX_TYPE_LENGTH)
        _ensure_length("affected user", owner_info.owner, _MAX_USER_LENGTH)
        _ensure_length("author", actor, _MAX_USER_LENGTH)
        _ensure_length("subject", subject_key.value, _MAX_SUBJECT_LENGTH)
        _ensure_length("object name", owner_info.path, _MAX_TEXT_LENGTH)
        _ensure_length("link", link, _MAX_TEXT_LENGTH)

        return ActivityEvent(
            app_id=self.app_id,
            kind=kind,
            affected_user=owner_info.owner,
            author=actor,
            timestamp=ensure_app_timezone(timestamp) or now_in_app_timezone(),
            subject_key=subject_key,
            subject_params=subject_params,
            object_ref=ObjectReference(
                resource_id=owner_info.resource_id,
                name=owner_info.path,
            ),
            link=link,
        )


__all__ = ["EventBuilder"]
