"""Domain entity describing one recorded download activity."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ActivityKind(str, Enum):
    """What kind of access an activity records."""

    FOLDER_DOWNLOADED = "folder_downloaded"
    FILE_DOWNLOADED = "file_downloaded"
    FILE_PREVIEWED = "file_previewed"
    FILE_CREATED = "file_created"
    ICON_DOWNLOADED = "file_icon_downloaded"
    OTHER_DOWNLOADED = "other_downloaded"


class SubjectKey(str, Enum):
    """Identifier of the sentence template that renders an activity."""

    SHARED_FOLDER = "shared_folder"
    FOLDER_SELF = "folder_self"
    SHARED_FILE = "shared_file"
    FILE_SELF = "file_self"
    SHARED_FILE_PREVIEW = "shared_file_preview"
    SHARED_FILE_CREATE = "shared_file_create"
    SHARED_FILE_ICON = "shared_file_icon"
    SHARED_OTHER = "shared_other"
    # Written by older releases, still rendered when read back.
    SHARED_FILE_DOWNLOADED = "shared_file_downloaded"
    SHARED_FOLDER_DOWNLOADED = "shared_folder_downloaded"


class ClientKind(str, Enum):
    """Channel through which a resource was accessed."""

    WEB = "web"
    DESKTOP = "desktop"
    MOBILE = "mobile"


SUBJECTS_BY_KIND: dict[ActivityKind, frozenset[SubjectKey]] = {
    ActivityKind.FOLDER_DOWNLOADED: frozenset(
        {
            SubjectKey.SHARED_FOLDER,
            SubjectKey.FOLDER_SELF,
            SubjectKey.SHARED_FOLDER_DOWNLOADED,
        }
    ),
    ActivityKind.FILE_DOWNLOADED: frozenset(
        {
            SubjectKey.SHARED_FILE,
            SubjectKey.FILE_SELF,
            SubjectKey.SHARED_FILE_DOWNLOADED,
        }
    ),
    ActivityKind.FILE_PREVIEWED: frozenset({SubjectKey.SHARED_FILE_PREVIEW}),
    ActivityKind.FILE_CREATED: frozenset({SubjectKey.SHARED_FILE_CREATE}),
    ActivityKind.ICON_DOWNLOADED: frozenset({SubjectKey.SHARED_FILE_ICON}),
    ActivityKind.OTHER_DOWNLOADED: frozenset({SubjectKey.SHARED_OTHER}),
}


def is_consistent(kind: ActivityKind, subject_key: SubjectKey) -> bool:
    """Return ``True`` when ``subject_key`` may describe an event of ``kind``."""

    return subject_key in SUBJECTS_BY_KIND.get(kind, frozenset())


@dataclass(frozen=True)
class SubjectParameters:
    """Ordered subject parameters: file reference, actor and client kind."""

    file_ref: Mapping[int, str]
    actor_id: str
    client_kind: ClientKind

    @property
    def resource_id(self) -> int:
        return next(iter(self.file_ref))

    @property
    def path(self) -> str:
        return self.file_ref[self.resource_id]

    def to_list(self) -> list[Any]:
        """Return the stored representation ``[{id: path}, actor, client]``."""

        return [
            {str(key): value for key, value in self.file_ref.items()},
            self.actor_id,
            self.client_kind.value,
        ]

    @classmethod
    def from_list(cls, values: Sequence[Any]) -> "SubjectParameters":
        """Rebuild parameters from their stored representation."""

        if len(values) < 3 or not isinstance(values[0], Mapping) or not values[0]:
            raise ValueError(f"Malformed subject parameters: {values!r}")
        file_ref = {int(key): str(value) for key, value in values[0].items()}
        try:
            client_kind = ClientKind(values[2])
        except ValueError:
            client_kind = ClientKind.WEB
        return cls(file_ref=file_ref, actor_id=str(values[1]), client_kind=client_kind)


@dataclass(frozen=True)
class ObjectReference:
    """The resource an activity is about."""

    resource_id: int
    name: str
    type: str = "files"


@dataclass(frozen=True)
class ActivityEvent:
    """Immutable activity record handed to the event store.

    ``kind`` and ``subject_key`` are plain strings when a stored record carries
    values this release does not know about.
    """

    app_id: str
    kind: ActivityKind | str
    affected_user: str
    author: str
    timestamp: datetime
    subject_key: SubjectKey | str
    subject_params: SubjectParameters
    object_ref: ObjectReference
    link: str
    id: int | None = field(default=None, compare=False)

    @property
    def is_self_access(self) -> bool:
        return self.author == self.affected_user


__all__ = [
    "ActivityEvent",
    "ActivityKind",
    "ClientKind",
    "ObjectReference",
    "SUBJECTS_BY_KIND",
    "SubjectKey",
    "SubjectParameters",
    "is_consistent",
]
