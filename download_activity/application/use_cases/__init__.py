"""Use cases recording and rendering download activity."""

from .access_classification import (
    AccessClassifier,
    Classification,
    classify_from_url_hint,
)
from .event_builder import EventBuilder
from .event_merging import EventMerger
from .owner_resolution import OwnerResolver
from .record_access import DownloadActivityListener, record_file_access
from .render_feed import (
    DownloadActivityProvider,
    group_rendered_events,
    render_activity_feed,
    render_events,
)
from .render_session import RenderSession
from .subject_rendering import RenderMode, SubjectRenderer, select_template

__all__ = [
    "AccessClassifier",
    "Classification",
    "DownloadActivityListener",
    "DownloadActivityProvider",
    "EventBuilder",
    "EventMerger",
    "OwnerResolver",
    "RenderMode",
    "RenderSession",
    "SubjectRenderer",
    "classify_from_url_hint",
    "group_rendered_events",
    "record_file_access",
    "render_activity_feed",
    "render_events",
    "select_template",
]
