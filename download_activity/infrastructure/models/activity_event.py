"""SQLAlchemy model for recorded download activities."""

from sqlalchemy import JSON, Column, DateTime, Index, Integer, String, Text

from download_activity.infrastructure.database import Base


class ActivityEventModel(Base):
    """Database representation of an activity event."""

    __tablename__ = "activity"
    __table_args__ = (
        Index("ix_activity_affected_user_timestamp", "affected_user", "timestamp"),
        Index("ix_activity_object", "object_type", "object_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    app = Column(String(32), nullable=False)
    type = Column(String(255), nullable=False)
    affected_user = Column(String(64), nullable=False)
    author = Column(String(64), nullable=False)
    timestamp = Column(DateTime(), nullable=False)
    subject = Column(String(255), nullable=False)
    subject_params = Column(JSON, nullable=False, default=list)
    object_type = Column(String(255), nullable=False)
    object_id = Column(Integer, nullable=False)
    object_name = Column(Text, nullable=False)
    link = Column(Text, nullable=False)


__all__ = ["ActivityEventModel"]
