"""Shared fixtures for the download activity tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from sqlalchemy.orm import Session

from download_activity import APP_ID
from download_activity.config import Settings
from download_activity.domain.entities import (
    ActivityEvent,
    ActivityKind,
    ClientKind,
    Node,
    ObjectReference,
    StorageKind,
    SubjectKey,
    SubjectParameters,
)
from download_activity.infrastructure.database import (
    Base,
    build_engine,
    build_session_factory,
    initialize_database,
)
from download_activity.infrastructure.repositories import NodeRepository, UserRepository
from download_activity.infrastructure.url_builder import UrlBuilder

from helpers import BASE_URL, FakeDisplayNames, at


@pytest.fixture()
def settings() -> Settings:
    return Settings(base_url=BASE_URL, database_url="sqlite://")


@pytest.fixture()
def url_builder() -> UrlBuilder:
    return UrlBuilder(BASE_URL)


@pytest.fixture()
def db_session() -> Iterator[Session]:
    """Provide a session bound to a fresh in-memory database."""

    engine = build_engine("sqlite://")
    initialize_database(engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def seeded_session(db_session: Session) -> Session:
    """A database where alice shares her photos and report with bob.

    bob also sees a file from a remote server and a share whose owner lost
    the source node.
    """

    users = UserRepository(db_session)
    users.create("alice", "Alice")
    users.create("bob", "Bob")
    users.create("carol", "Carol")

    nodes = NodeRepository(db_session)
    nodes.add("alice", Node(id=10, path="/Photos", owner="alice", is_container=True))
    nodes.add("alice", Node(id=11, path="/Photos/cat.png", owner="alice", is_container=False))
    nodes.add("alice", Node(id=12, path="/report.pdf", owner="alice", is_container=False))

    nodes.add("bob", Node(id=10, path="/Shared/Photos", owner="alice", is_container=True))
    nodes.add(
        "bob", Node(id=11, path="/Shared/Photos/cat.png", owner="alice", is_container=False)
    )
    nodes.add("bob", Node(id=12, path="/report.pdf", owner="alice", is_container=False))
    nodes.add(
        "bob",
        Node(
            id=30,
            path="/Remote/notes.txt",
            owner="dave@remote.example.org",
            is_container=False,
            storage_kind=StorageKind.EXTERNAL_SHARE,
        ),
    )
    nodes.add("bob", Node(id=40, path="/Ghost.txt", owner="erin", is_container=False))
    return db_session


@pytest.fixture()
def make_event() -> Callable[..., ActivityEvent]:
    """Return a factory for stored activity events."""

    def _make_event(
        *,
        kind: ActivityKind | str = ActivityKind.FILE_DOWNLOADED,
        subject_key: SubjectKey | str = SubjectKey.SHARED_FILE,
        author: str = "bob",
        affected_user: str = "alice",
        resource_id: int = 11,
        path: str = "/Photos/cat.png",
        client_kind: ClientKind = ClientKind.WEB,
        timestamp: float = 1_000,
        app_id: str = APP_ID,
        event_id: int | None = None,
    ) -> ActivityEvent:
        return ActivityEvent(
            id=event_id,
            app_id=app_id,
            kind=kind,
            affected_user=affected_user,
            author=author,
            timestamp=at(timestamp),
            subject_key=subject_key,
            subject_params=SubjectParameters(
                file_ref={resource_id: path},
                actor_id=author,
                client_kind=client_kind,
            ),
            object_ref=ObjectReference(resource_id=resource_id, name=path),
            link=f"{BASE_URL}/index.php/apps/files/?dir=%2F",
        )

    return _make_event


@pytest.fixture()
def display_names() -> FakeDisplayNames:
    return FakeDisplayNames()
