"""Resolve who owns an accessed node and where it lives in the owner's tree."""

from __future__ import annotations

import logging
from typing import Protocol

from download_activity.domain.entities import Node, OwnerInfo, StorageKind
from download_activity.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class NodeStore(Protocol):
    def get_node(self, user_id: str, path: str) -> Node: ...

    def get_nodes_by_id(self, user_id: str, resource_id: int) -> list[Node]: ...

    def init_mount_points(self, user_id: str) -> None: ...


class OwnerResolver:
    """Walk share indirection back to the owning user's view of a node."""

    def __init__(self, node_store: NodeStore) -> None:
        self.node_store = node_store

    def resolve(self, requesting_user: str, path: str) -> OwnerInfo:
        """Return the canonical path, owner, resource id and container flag.

        Nodes shared in from a remote server are attributed to
        ``requesting_user`` because the remote owner cannot be looked up.

        Raises:
            NotFound: the node is missing, or missing from the owner's view.
            InvalidPath: ``path`` is malformed.
        """

        node = self.node_store.get_node(requesting_user, path)
        owner = node.owner

        if owner != requesting_user:
            if node.storage_kind is StorageKind.EXTERNAL_SHARE:
                logger.debug(
                    "Node %s of %s comes from a remote share, attributing it to %s",
                    node.id,
                    owner,
                    requesting_user,
                )
                owner = requesting_user
            else:
                self.node_store.init_mount_points(owner)

            nodes = self.node_store.get_nodes_by_id(owner, node.id)
            if not nodes:
                raise NotFound(node.path)
            node = nodes[0]
            path = node.path

        return OwnerInfo(
            path=path,
            owner=owner,
            resource_id=node.id,
            is_container=node.is_container,
        )


__all__ = ["NodeStore", "OwnerResolver"]
