"""ORM models used by the application infrastructure."""

from .activity_event import ActivityEventModel
from .node import NodeModel
from .user import UserModel

__all__ = [
    "ActivityEventModel",
    "NodeModel",
    "UserModel",
]
