"""Adjacent-pair merge of rendered feed entries.

Two entries merge under a key (``actor`` or ``file``) when they come from the
same app, share kind and subject, lie within the merge window, and agree on
every parameter except the key. The key placeholder of the newer entry is then
expanded to list every distinct value, newest first.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from datetime import timedelta

from download_activity.config import Settings, get_settings
from download_activity.domain.entities import (
    FileParameter,
    RenderedEvent,
    RichParameter,
    RichSubject,
)

logger = logging.getLogger(__name__)

_LIST_PATTERNS = {
    2: "{0} and {1}",
    3: "{0}, {1} and {2}",
    4: "{0}, {1}, {2} and {3}",
    5: "{0}, {1}, {2}, {3} and {4}",
}


class _CannotMerge(Exception):
    pass


def generate_parsed_subject(template: str, parameters: Mapping[str, RichParameter]) -> str:
    """Substitute placeholders with display text.

    File paths lose their leading and trailing slashes, as in the host merger.
    """

    parsed = template
    for placeholder, parameter in parameters.items():
        if isinstance(parameter, FileParameter):
            replacement = parameter.path.strip("/")
        else:
            replacement = parameter.name or str(parameter.id)
        parsed = parsed.replace("{" + placeholder + "}", replacement)
    return parsed


class EventMergePrimitive:
    """Collapse a rendered entry into its predecessor when they only differ by a key."""

    def __init__(
        self,
        *,
        window: timedelta | None = None,
        max_parameters: int | None = None,
        translate: Callable[[str], str] | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.window = window or timedelta(seconds=settings.merge_window_seconds)
        self.max_parameters = max_parameters or settings.max_merged_parameters
        self._translate = translate or (lambda text: text)

    def merge_events(
        self, key: str, event: RenderedEvent, previous: RenderedEvent | None
    ) -> RenderedEvent:
        if previous is None:
            return event
        if event.app_id != previous.app_id:
            return event
        if event.kind != previous.kind:
            return event
        if event.subject_key != previous.subject_key:
            return event
        if abs(event.timestamp - previous.timestamp) > self.window:
            return event

        try:
            combined, parameters = self._combine_parameters(
                key, event.rich_subject.parameters, previous.rich_subject.parameters
            )
            template = self._extend_subject(event.rich_subject.template, key, combined)
        except _CannotMerge:
            return event

        event.rich_subject = RichSubject(template=template, parameters=parameters)
        event.parsed_subject = generate_parsed_subject(template, parameters)
        event.child_event = previous
        event.timestamp = max(event.timestamp, previous.timestamp)
        logger.debug("Merged activity entries by %s into a group of %d", key, combined)
        return event

    def _combine_parameters(
        self,
        key: str,
        current: Mapping[str, RichParameter],
        previous: Mapping[str, RichParameter],
    ) -> tuple[int, dict[str, RichParameter]]:
        key_pattern = re.compile(rf"^{re.escape(key)}(\d+)?$")
        combined = 0
        parameters: dict[str, RichParameter] = {}

        for own, other in ((current, previous), (previous, current)):
            for name, parameter in own.items():
                if key_pattern.match(name):
                    already_listed = any(
                        key_pattern.match(listed) and value == parameter
                        for listed, value in parameters.items()
                    )
                    if not already_listed:
                        combined += 1
                        parameters[f"{key}{combined}"] = parameter
                    continue
                if other.get(name) != parameter:
                    raise _CannotMerge()
                parameters[name] = parameter

        if combined == 0 or combined > self.max_parameters:
            raise _CannotMerge()
        return combined, parameters

    def _extend_subject(self, template: str, key: str, counter: int) -> str:
        if counter == 1:
            replacement = "{" + key + "1}"
        else:
            placeholders = ["{" + f"{key}{index}" + "}" for index in range(counter, 0, -1)]
            replacement = self._translate(_LIST_PATTERNS[counter]).format(*placeholders)
        return template.replace("{" + key + "}", replacement)


__all__ = ["EventMergePrimitive", "generate_parsed_subject"]
