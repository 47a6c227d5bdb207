"""Node store backed by the ``file_node`` table."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from download_activity.domain.entities import Node, StorageKind
from download_activity.domain.exceptions import InvalidPath, NotFound
from download_activity.infrastructure.models import NodeModel

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Validate ``path`` and return it without a trailing slash."""

    if not isinstance(path, str) or not path:
        raise InvalidPath(str(path), "path is empty")
    if "\0" in path:
        raise InvalidPath(path, "path contains a NUL byte")
    if not path.startswith("/"):
        raise InvalidPath(path, "path must be absolute")
    segments = path.split("/")
    if any(segment in ("..", ".") for segment in segments):
        raise InvalidPath(path, "path must not contain relative segments")
    if len(path) > 1:
        return path.rstrip("/") or "/"
    return path


class NodeRepository:
    """Look nodes up by path or resource id inside a user's view."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self._mounted: set[str] = set()

    def get_node(self, user_id: str, path: str) -> Node:
        normalized = normalize_path(path)
        model = (
            self.session.query(NodeModel)
            .filter(NodeModel.user_id == user_id)
            .filter(NodeModel.path == normalized)
            .one_or_none()
        )
        if model is None:
            raise NotFound(path)
        return self._to_entity(model)

    def get_nodes_by_id(self, user_id: str, resource_id: int) -> list[Node]:
        query = (
            self.session.query(NodeModel)
            .filter(NodeModel.user_id == user_id)
            .filter(NodeModel.file_id == resource_id)
            .order_by(NodeModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def init_mount_points(self, user_id: str) -> None:
        """Prepare ``user_id``'s view for lookups.

        Views are stored fully materialised, so this only records the mount.
        """

        if user_id not in self._mounted:
            logger.debug("Mounting file tree of %s", user_id)
            self._mounted.add(user_id)

    def add(self, user_id: str, node: Node) -> Node:
        """Make ``node`` visible in the view of ``user_id``."""

        model = NodeModel(
            file_id=node.id,
            user_id=user_id,
            path=normalize_path(node.path),
            owner=node.owner,
            is_folder=node.is_container,
            storage_kind=node.storage_kind.value,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: NodeModel) -> Node:
        try:
            storage_kind = StorageKind(model.storage_kind)
        except ValueError:
            storage_kind = StorageKind.LOCAL
        return Node(
            id=model.file_id,
            path=model.path,
            owner=model.owner,
            is_container=bool(model.is_folder),
            storage_kind=storage_kind,
        )


__all__ = ["NodeRepository", "normalize_path"]
