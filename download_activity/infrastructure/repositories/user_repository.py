"""Persistence layer for user display names."""

from __future__ import annotations

from sqlalchemy.orm import Session

from download_activity.infrastructure.models import UserModel


class UserRepository:
    """Resolve user identities to display names."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, uid: str, display_name: str | None = None) -> None:
        self.session.add(UserModel(uid=uid, display_name=display_name))
        self.session.commit()

    def get_display_name(self, uid: str) -> str:
        """Return the display name of ``uid``, or ``uid`` itself when unknown."""

        model = self.session.query(UserModel).filter(UserModel.uid == uid).one_or_none()
        if model is None or not model.display_name:
            return uid
        return model.display_name


__all__ = ["UserRepository"]
