"""Absolute links into the host's files viewer."""

from __future__ import annotations

from urllib.parse import quote, urlencode

from download_activity.config import get_settings


class UrlBuilder:
    """Build viewer and asset URLs relative to the configured ``base_url``."""

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = (base_url or get_settings().base_url).rstrip("/")

    def absolute_url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.base_url}{path}"

    def link_to_files_view(self, dir: str, scrollto: str | None = None) -> str:
        """Return the viewer link for directory ``dir``, optionally focusing a file."""

        params = {"dir": dir}
        if scrollto is not None:
            params["scrollto"] = scrollto
        return self.absolute_url(f"/index.php/apps/files/?{urlencode(params)}")

    def link_to_file(self, file_id: int) -> str:
        return self.absolute_url(f"/index.php/f/{int(file_id)}")

    def image_path(self, app: str, image: str) -> str:
        return f"/{quote(app)}/img/{quote(image)}"


__all__ = ["UrlBuilder"]
