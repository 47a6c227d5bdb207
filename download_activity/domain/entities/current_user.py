"""Domain entity for the user performing a file access."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentUser:
    """The acting user. ``uid`` is ``None`` for anonymous link access."""

    uid: str | None
    cloud_id: str | None = None

    @property
    def is_logged_in(self) -> bool:
        return self.uid is not None

    @property
    def identifier(self) -> str:
        """Return the identity stored as the activity actor."""

        if self.uid is not None:
            return self.uid
        return self.cloud_id or ""


__all__ = ["CurrentUser"]
