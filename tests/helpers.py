"""Constants and small fakes shared by the test modules."""

from __future__ import annotations

from datetime import datetime, timezone

BASE_URL = "https://cloud.example.com"
WEB_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:130.0) Gecko/20100101 Firefox/130.0"
DESKTOP_AGENT = "Mozilla/5.0 (Linux) mirall/3.13.0 (Nextcloud, ubuntu)"
ANDROID_AGENT = "Mozilla/5.0 (Android) Nextcloud-android/3.29.0"
IOS_AGENT = "Mozilla/5.0 (iOS) Nextcloud-iOS/5.5.0"


def at(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


class FakeDisplayNames:
    """Display name service that counts lookups."""

    def __init__(self, names: dict[str, str] | None = None) -> None:
        self.names = names or {"alice": "Alice", "bob": "Bob", "carol": "Carol"}
        self.lookups: list[str] = []

    def get_display_name(self, uid: str) -> str:
        self.lookups.append(uid)
        return self.names.get(uid, uid)
