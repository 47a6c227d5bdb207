"""SQLAlchemy model for nodes visible in a user's file tree."""

from sqlalchemy import Boolean, Column, Integer, String, Text, UniqueConstraint

from download_activity.domain.entities import StorageKind
from download_activity.infrastructure.database import Base


class NodeModel(Base):
    """One node as mounted in the view of ``user_id``.

    A shared resource has one row per user it is visible to, all carrying the
    same ``file_id``.
    """

    __tablename__ = "file_node"
    __table_args__ = (UniqueConstraint("user_id", "path", name="uq_file_node_user_path"),)

    id = Column(Integer, primary_key=True, index=True)
    file_id = Column(Integer, nullable=False, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    path = Column(Text, nullable=False)
    owner = Column(String(64), nullable=False)
    is_folder = Column(Boolean, nullable=False, default=False)
    storage_kind = Column(String(32), nullable=False, default=StorageKind.LOCAL.value)


__all__ = ["NodeModel"]
