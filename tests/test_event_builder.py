"""Tests for assembling activity events."""

from __future__ import annotations

import pytest

from download_activity import APP_ID
from download_activity.application.use_cases.event_builder import EventBuilder
from download_activity.domain.entities import (
    ActivityKind,
    ClientKind,
    ObjectReference,
    OwnerInfo,
    SubjectKey,
    SubjectParameters,
)
from download_activity.domain.exceptions import InvalidEvent

from helpers import at

OWNER = OwnerInfo(path="/Photos/cat.png", owner="alice", resource_id=11, is_container=False)
PARAMS = SubjectParameters(file_ref={11: "/Photos/cat.png"}, actor_id="bob", client_kind=ClientKind.WEB)
LINK = "https://cloud.example.com/index.php/apps/files/?dir=%2FPhotos&scrollto=cat.png"


def test_build_returns_complete_event() -> None:
    event = EventBuilder().build(
        OWNER,
        "bob",
        ActivityKind.FILE_DOWNLOADED,
        SubjectKey.SHARED_FILE,
        PARAMS,
        LINK,
        timestamp=at(100),
    )

    assert event.app_id == APP_ID
    assert event.kind is ActivityKind.FILE_DOWNLOADED
    assert event.subject_key is SubjectKey.SHARED_FILE
    assert event.affected_user == "alice"
    assert event.author == "bob"
    assert event.timestamp == at(100)
    assert event.object_ref == ObjectReference(resource_id=11, name="/Photos/cat.png")
    assert event.subject_params.resource_id == event.object_ref.resource_id
    assert event.link == LINK
    assert event.is_self_access is False


def test_build_defaults_timestamp_to_now() -> None:
    event = EventBuilder().build(
        OWNER, "bob", ActivityKind.FILE_DOWNLOADED, SubjectKey.SHARED_FILE, PARAMS, LINK
    )

    assert event.timestamp.tzinfo is not None


def test_missing_app_is_rejected() -> None:
    with pytest.raises(InvalidEvent, match="App not set"):
        EventBuilder(app_id="").build(
            OWNER, "bob", ActivityKind.FILE_DOWNLOADED, SubjectKey.SHARED_FILE, PARAMS, LINK
        )


def test_missing_subject_is_rejected() -> None:
    with pytest.raises(InvalidEvent, match="Subject not set"):
        EventBuilder().build(OWNER, "bob", ActivityKind.FILE_DOWNLOADED, None, PARAMS, LINK)


def test_missing_affected_user_is_rejected() -> None:
    orphan = OwnerInfo(path="/Photos/cat.png", owner="", resource_id=11, is_container=False)

    with pytest.raises(InvalidEvent, match="Affected user not set"):
        EventBuilder().build(
            orphan, "bob", ActivityKind.FILE_DOWNLOADED, SubjectKey.SHARED_FILE, PARAMS, LINK
        )


@pytest.mark.parametrize(
    ("kind", "subject"),
    [
        (ActivityKind.FILE_DOWNLOADED, SubjectKey.SHARED_FILE_PREVIEW),
        (ActivityKind.FOLDER_DOWNLOADED, SubjectKey.FILE_SELF),
        (ActivityKind.ICON_DOWNLOADED, SubjectKey.SHARED_OTHER),
    ],
)
def test_inconsistent_kind_and_subject_are_rejected(
    kind: ActivityKind, subject: SubjectKey
) -> None:
    with pytest.raises(InvalidEvent, match="cannot describe"):
        EventBuilder().build(OWNER, "bob", kind, subject, PARAMS, LINK)


def test_file_reference_must_match_object() -> None:
    params = SubjectParameters(file_ref={99: "/Photos/cat.png"}, actor_id="bob", client_kind=ClientKind.WEB)

    with pytest.raises(InvalidEvent, match="does not match"):
        EventBuilder().build(
            OWNER, "bob", ActivityKind.FILE_DOWNLOADED, SubjectKey.SHARED_FILE, params, LINK
        )


def test_overlong_author_is_rejected() -> None:
    with pytest.raises(InvalidEvent, match="author"):
        EventBuilder().build(
            OWNER, "b" * 65, ActivityKind.FILE_DOWNLOADED, SubjectKey.SHARED_FILE, PARAMS, LINK
        )
