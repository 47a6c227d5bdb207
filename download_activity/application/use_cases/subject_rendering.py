"""Render stored download activities as feed sentences."""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Mapping
from enum import Enum

from download_activity import APP_ID
from download_activity.config import Settings, get_settings
from download_activity.domain.entities import (
    ActivityEvent,
    ActivityKind,
    ClientKind,
    FileParameter,
    RenderedEvent,
    RichParameter,
    RichSubject,
    SubjectKey,
    UserParameter,
)
from download_activity.domain.exceptions import UnsupportedEvent
from download_activity.infrastructure.url_builder import UrlBuilder

from .render_session import RenderSession

logger = logging.getLogger(__name__)


class RenderMode(str, Enum):
    """``SHORT`` is used when the feed is filtered to a single file."""

    SHORT = "short"
    LONG = "long"


class SentenceFamily(str, Enum):
    DOWNLOAD = "download"
    ACCESS = "access"


class Perspective(str, Enum):
    SELF = "self"
    SHARED = "shared"


SUBJECT_TEMPLATES: dict[tuple[RenderMode, SentenceFamily, Perspective, ClientKind], str] = {
    (RenderMode.SHORT, SentenceFamily.DOWNLOAD, Perspective.SHARED, ClientKind.DESKTOP):
        "Downloaded by {actor} (via desktop)",
    (RenderMode.SHORT, SentenceFamily.DOWNLOAD, Perspective.SHARED, ClientKind.MOBILE):
        "Downloaded by {actor} (via app)",
    (RenderMode.SHORT, SentenceFamily.DOWNLOAD, Perspective.SHARED, ClientKind.WEB):
        "Downloaded by {actor} (via browser)",
    (RenderMode.SHORT, SentenceFamily.ACCESS, Perspective.SHARED, ClientKind.DESKTOP):
        "Accessed by {actor} (via desktop)",
    (RenderMode.SHORT, SentenceFamily.ACCESS, Perspective.SHARED, ClientKind.MOBILE):
        "Accessed by {actor} (via app)",
    (RenderMode.SHORT, SentenceFamily.ACCESS, Perspective.SHARED, ClientKind.WEB):
        "Accessed by {actor} (via browser)",
    (RenderMode.LONG, SentenceFamily.DOWNLOAD, Perspective.SELF, ClientKind.DESKTOP):
        "You downloaded {file} via the desktop client",
    (RenderMode.LONG, SentenceFamily.DOWNLOAD, Perspective.SELF, ClientKind.MOBILE):
        "You downloaded {file} via the mobile app",
    (RenderMode.LONG, SentenceFamily.DOWNLOAD, Perspective.SELF, ClientKind.WEB):
        "You downloaded {file} via the browser",
    (RenderMode.LONG, SentenceFamily.DOWNLOAD, Perspective.SHARED, ClientKind.DESKTOP):
        "Shared file {file} was downloaded by {actor} via the desktop client",
    (RenderMode.LONG, SentenceFamily.DOWNLOAD, Perspective.SHARED, ClientKind.MOBILE):
        "Shared file {file} was downloaded by {actor} via the mobile app",
    (RenderMode.LONG, SentenceFamily.DOWNLOAD, Perspective.SHARED, ClientKind.WEB):
        "Shared file {file} was downloaded by {actor} via the browser",
    (RenderMode.LONG, SentenceFamily.ACCESS, Perspective.SHARED, ClientKind.DESKTOP):
        "File {file} accessed by {actor} via the desktop client",
    (RenderMode.LONG, SentenceFamily.ACCESS, Perspective.SHARED, ClientKind.MOBILE):
        "File {file} accessed by {actor} via the mobile app",
    (RenderMode.LONG, SentenceFamily.ACCESS, Perspective.SHARED, ClientKind.WEB):
        "File {file} accessed by {actor} via the browser",
}


def select_template(
    mode: RenderMode, kind: ActivityKind, is_self: bool, client_kind: ClientKind
) -> str:
    """Return the untranslated sentence for one combination of event traits.

    Only long download sentences distinguish the owner's own downloads.
    """

    family = (
        SentenceFamily.DOWNLOAD
        if kind is ActivityKind.FILE_DOWNLOADED
        else SentenceFamily.ACCESS
    )
    perspective = Perspective.SHARED
    if mode is RenderMode.LONG and family is SentenceFamily.DOWNLOAD and is_self:
        perspective = Perspective.SELF
    return SUBJECT_TEMPLATES[(mode, family, perspective, client_kind)]


def parse_subject(template: str, parameters: Mapping[str, RichParameter]) -> str:
    """Substitute every ``{placeholder}`` with its parameter's display text."""

    parsed = template
    for placeholder, parameter in parameters.items():
        parsed = parsed.replace("{" + placeholder + "}", parameter.display_text())
    return parsed


class SubjectRenderer:
    """Render one :class:`ActivityEvent` into a :class:`RenderedEvent`."""

    def __init__(
        self, url_builder: UrlBuilder | None = None, settings: Settings | None = None
    ) -> None:
        self.url_builder = url_builder or UrlBuilder()
        self.settings = settings or get_settings()

    def render(
        self, event: ActivityEvent, session: RenderSession, mode: RenderMode
    ) -> RenderedEvent:
        if event.app_id != APP_ID:
            raise UnsupportedEvent(f"Cannot render activities of app '{event.app_id}'")
        if not isinstance(event.kind, ActivityKind):
            raise UnsupportedEvent(f"Cannot render activities of type '{event.kind}'")

        parameters = self.extract_parameters(event, session)
        template = session.translate(
            select_template(
                mode,
                event.kind,
                event.is_self_access,
                event.subject_params.client_kind,
            )
        )
        return RenderedEvent(
            event=event,
            parsed_subject=parse_subject(template, parameters),
            rich_subject=RichSubject(template=template, parameters=parameters),
            timestamp=event.timestamp,
            icon=self.icon_url(),
        )

    def extract_parameters(
        self, event: ActivityEvent, session: RenderSession
    ) -> dict[str, RichParameter]:
        if not isinstance(event.subject_key, SubjectKey):
            logger.debug("No parameters for unknown subject '%s'", event.subject_key)
            return {}

        params = event.subject_params
        return {
            "file": self._file_parameter(params.resource_id, params.path),
            "actor": UserParameter(id=params.actor_id, name=session.display_name(params.actor_id)),
        }

    def icon_url(self) -> str:
        image = "actions/share.png" if self.settings.require_png_icons else "actions/share.svg"
        return self.url_builder.absolute_url(self.url_builder.image_path("core", image))

    def _file_parameter(self, resource_id: int, path: str) -> FileParameter:
        return FileParameter(
            id=int(resource_id),
            name=posixpath.basename(path),
            path=path,
            link=self.url_builder.link_to_file(resource_id),
        )


__all__ = [
    "Perspective",
    "RenderMode",
    "SentenceFamily",
    "SUBJECT_TEMPLATES",
    "SubjectRenderer",
    "parse_subject",
    "select_template",
]
