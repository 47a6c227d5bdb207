"""Decide what kind of access a file read was and how to describe it."""

from __future__ import annotations

import logging
import posixpath
import re
from dataclasses import dataclass, field

from download_activity.config import Settings, get_settings
from download_activity.domain.entities import (
    ActivityKind,
    ClientKind,
    OwnerInfo,
    RequestContext,
    SubjectKey,
)

logger = logging.getLogger(__name__)

_SHARED_SUBJECTS: dict[ActivityKind, SubjectKey] = {
    ActivityKind.ICON_DOWNLOADED: SubjectKey.SHARED_FILE_ICON,
    ActivityKind.FILE_PREVIEWED: SubjectKey.SHARED_FILE_PREVIEW,
    ActivityKind.FILE_CREATED: SubjectKey.SHARED_FILE_CREATE,
    ActivityKind.OTHER_DOWNLOADED: SubjectKey.SHARED_OTHER,
}


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one access."""

    kind: ActivityKind
    subject_key: SubjectKey
    link_hints: dict[str, str] = field(default_factory=dict)


def classify_from_url_hint(segment: str) -> ActivityKind:
    """Guess the access kind from the last segment of the request URL."""

    lowered = segment.lower()
    if "preview" in lowered:
        return ActivityKind.FILE_PREVIEWED
    if "create" in lowered:
        return ActivityKind.FILE_CREATED
    return ActivityKind.OTHER_DOWNLOADED


def url_terminal_segment(path_info: str) -> str:
    """Return the file name of ``path_info`` without its extension."""

    name = posixpath.basename(path_info.rstrip("/"))
    stem, _ = posixpath.splitext(name)
    return stem


def parent_directory(path: str) -> str:
    if path.count("/") == 1:
        return "/"
    return posixpath.dirname(path)


class AccessClassifier:
    """Turn a resolved access into an activity kind and subject."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._desktop_pattern = re.compile(self.settings.desktop_user_agent_pattern)
        self._mobile_patterns = [
            re.compile(pattern) for pattern in self.settings.mobile_user_agent_patterns
        ]

    def detect_client_kind(self, user_agent: str) -> ClientKind:
        if self._desktop_pattern.match(user_agent or ""):
            return ClientKind.DESKTOP
        if any(pattern.match(user_agent or "") for pattern in self._mobile_patterns):
            return ClientKind.MOBILE
        return ClientKind.WEB

    def classify(
        self,
        owner_info: OwnerInfo,
        actor: str,
        is_self_access: bool,
        request: RequestContext,
    ) -> Classification | None:
        """Return the classification, or ``None`` when the access is not worth logging."""

        if owner_info.is_container:
            subject = SubjectKey.FOLDER_SELF if is_self_access else SubjectKey.SHARED_FOLDER
            return Classification(
                kind=ActivityKind.FOLDER_DOWNLOADED,
                subject_key=subject,
                link_hints={"dir": owner_info.path},
            )

        link_hints = {
            "dir": parent_directory(owner_info.path),
            "scrollto": posixpath.basename(owner_info.path),
        }

        if request.get_param(self.settings.download_start_parameter) != "":
            subject = SubjectKey.FILE_SELF if is_self_access else SubjectKey.SHARED_FILE
            return Classification(
                kind=ActivityKind.FILE_DOWNLOADED,
                subject_key=subject,
                link_hints=link_hints,
            )

        if is_self_access:
            logger.debug("Ignoring incidental read of %s by its owner", owner_info.path)
            return None

        if all(request.has_param(name) for name in self.settings.thumbnail_parameters):
            kind = ActivityKind.ICON_DOWNLOADED
        else:
            kind = classify_from_url_hint(url_terminal_segment(request.path_info))

        logger.debug("Classified access of %s by %s as %s", owner_info.path, actor, kind.value)
        return Classification(
            kind=kind,
            subject_key=_SHARED_SUBJECTS[kind],
            link_hints=link_hints,
        )


__all__ = [
    "AccessClassifier",
    "Classification",
    "classify_from_url_hint",
    "parent_directory",
    "url_terminal_segment",
]
