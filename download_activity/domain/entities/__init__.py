"""Domain entities exposed by the application."""

from .activity_event import (
    SUBJECTS_BY_KIND,
    ActivityEvent,
    ActivityKind,
    ClientKind,
    ObjectReference,
    SubjectKey,
    SubjectParameters,
    is_consistent,
)
from .current_user import CurrentUser
from .node import Node, OwnerInfo, StorageKind
from .parameters import FileParameter, RichParameter, UserParameter
from .rendered_event import RenderedEvent, RichSubject
from .request_context import RequestContext

__all__ = [
    "ActivityEvent",
    "ActivityKind",
    "ClientKind",
    "CurrentUser",
    "FileParameter",
    "Node",
    "ObjectReference",
    "OwnerInfo",
    "RenderedEvent",
    "RequestContext",
    "RichParameter",
    "RichSubject",
    "StorageKind",
    "SubjectKey",
    "SubjectParameters",
    "SUBJECTS_BY_KIND",
    "UserParameter",
    "is_consistent",
]
