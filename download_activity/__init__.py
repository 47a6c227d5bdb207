"""Classify file downloads into activity events and render them as an audit feed."""

APP_ID = "files_downloadactivity"

__all__ = ["APP_ID"]
