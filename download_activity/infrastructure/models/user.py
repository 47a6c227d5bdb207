"""SQLAlchemy model for user accounts known to the display name lookup."""

from sqlalchemy import Column, Integer, String

from download_activity.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a user account."""

    __tablename__ = "user_account"

    id = Column(Integer, primary_key=True, index=True)
    uid = Column(String(64), nullable=False, unique=True, index=True)
    display_name = Column(String(255), nullable=True)


__all__ = ["UserModel"]
