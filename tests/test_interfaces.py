"""Tests for the FastAPI request adapter, feed schemas and settings."""

from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi import Request

from download_activity.application.use_cases.render_session import RenderSession
from download_activity.application.use_cases.subject_rendering import RenderMode, SubjectRenderer
from download_activity.config import Settings, reset_settings_cache
from download_activity.interfaces.dependencies import get_request_context
from download_activity.interfaces.schemas import rendered_event_to_schema
from download_activity.utils import get_app_timezone

from helpers import BASE_URL, IOS_AGENT, FakeDisplayNames


def _request(path: str, query: bytes, user_agent: str) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "https",
        "server": ("cloud.example.com", 443),
        "path": path,
        "query_string": query,
        "headers": [(b"user-agent", user_agent.encode())],
    }
    return Request(scope)


def test_request_context_captures_agent_query_and_path() -> None:
    request = _request("/index.php/core/preview.png", b"x=32&y=32&fileId=11", IOS_AGENT)

    context = get_request_context(request)

    assert context.user_agent == IOS_AGENT
    assert context.query == {"x": "32", "y": "32", "fileId": "11"}
    assert context.path_info == "/index.php/core/preview.png"
    assert context.has_param("x")
    assert context.get_param("downloadStartSecret") == ""


def test_request_context_without_user_agent() -> None:
    scope = {"type": "http", "method": "GET", "path": "/", "query_string": b"", "headers": []}

    context = get_request_context(Request(scope))

    assert context.user_agent == ""
    assert context.query == {}


def test_rendered_event_schema(make_event, url_builder, settings) -> None:
    renderer = SubjectRenderer(url_builder, settings)
    entry = renderer.render(
        make_event(event_id=7), RenderSession(FakeDisplayNames()), RenderMode.LONG
    )

    schema = rendered_event_to_schema(entry)

    assert schema.activity_id == 7
    assert schema.app == "files_downloadactivity"
    assert schema.type == "file_downloaded"
    assert schema.subject == "Shared file /Photos/cat.png was downloaded by Bob via the browser"
    assert schema.subject_rich.parameters["actor"] == {"type": "user", "id": "bob", "name": "Bob"}
    assert schema.subject_rich.parameters["file"]["link"] == f"{BASE_URL}/index.php/f/11"
    assert schema.object_id == 11
    assert schema.grouped_count == 1


def test_settings_strip_trailing_slash_from_base_url() -> None:
    assert Settings(base_url="https://cloud.example.com/").base_url == BASE_URL


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DOWNLOAD_ACTIVITY_MERGE_WINDOW_SECONDS", "60")
    monkeypatch.setenv("DOWNLOAD_ACTIVITY_REQUIRE_PNG_ICONS", "true")

    settings = Settings()

    assert settings.merge_window_seconds == 60
    assert settings.require_png_icons is True


@pytest.fixture()
def fresh_settings(monkeypatch):
    reset_settings_cache()
    yield monkeypatch
    reset_settings_cache()


def test_timezone_follows_reloaded_settings(fresh_settings) -> None:
    fresh_settings.setenv("DOWNLOAD_ACTIVITY_APP_TIMEZONE", "UTC+02:00")
    reset_settings_cache()
    assert get_app_timezone().utcoffset(None) == timedelta(hours=2)

    fresh_settings.setenv("DOWNLOAD_ACTIVITY_APP_TIMEZONE", "UTC-05:30")
    reset_settings_cache()
    assert get_app_timezone().utcoffset(None) == timedelta(hours=-5, minutes=-30)
