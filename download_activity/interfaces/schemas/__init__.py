"""Pydantic schemas for machine readable feed output."""

from .activity import RenderedEventRead, RichSubjectRead, rendered_event_to_schema

__all__ = ["RenderedEventRead", "RichSubjectRead", "rendered_event_to_schema"]
