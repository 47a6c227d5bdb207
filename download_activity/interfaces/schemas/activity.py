"""Pydantic schemas describing rendered feed entries."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from download_activity.domain.entities import RenderedEvent


class RichSubjectRead(BaseModel):
    subject: str = Field(..., description="Sentence template with {placeholders}")
    parameters: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Placeholder values keyed by placeholder name",
    )


class RenderedEventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    activity_id: int | None = Field(None, description="Identifier of the newest stored event")
    app: str = Field(..., description="App that recorded the activity")
    type: str = Field(..., description="Kind of access")
    subject: str = Field(..., description="Flattened, human readable sentence")
    subject_rich: RichSubjectRead
    affected_user: str = Field(..., description="Owner of the accessed resource")
    author: str = Field(..., description="User who accessed the resource")
    timestamp: datetime = Field(..., description="Newest access represented by this entry")
    object_type: str
    object_id: int
    object_name: str
    link: str
    icon: str | None = None
    grouped_count: int = Field(1, ge=1, description="Number of stored events in this entry")


def rendered_event_to_schema(entry: RenderedEvent) -> RenderedEventRead:
    event = entry.event
    return RenderedEventRead(
        activity_id=event.id,
        app=entry.app_id,
        type=entry.kind,
        subject=entry.parsed_subject,
        subject_rich=RichSubjectRead(
            subject=entry.rich_subject.template,
            parameters={
                name: parameter.to_dict()
                for name, parameter in entry.rich_subject.parameters.items()
            },
        ),
        affected_user=event.affected_user,
        author=event.author,
        timestamp=entry.timestamp,
        object_type=event.object_ref.type,
        object_id=event.object_ref.resource_id,
        object_name=event.object_ref.name,
        link=event.link,
        icon=entry.icon,
        grouped_count=entry.group_size(),
    )


__all__ = ["RenderedEventRead", "RichSubjectRead", "rendered_event_to_schema"]
