"""Repository implementations for infrastructure layer."""

from .activity_event_repository import ActivityEventRepository
from .node_repository import NodeRepository, normalize_path
from .user_repository import UserRepository

__all__ = [
    "ActivityEventRepository",
    "NodeRepository",
    "UserRepository",
    "normalize_path",
]
