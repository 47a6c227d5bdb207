"""Domain entities describing files and folders as seen by one user."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StorageKind(str, Enum):
    """Where the bytes behind a node live."""

    LOCAL = "local"
    EXTERNAL_SHARE = "external_share"


@dataclass(frozen=True)
class Node:
    """A file or folder located in a user's view of the file tree.

    ``path`` is relative to the root of the user the node was looked up for.
    ``id`` is the stable resource identifier shared by every view of the node.
    """

    id: int
    path: str
    owner: str
    is_container: bool
    storage_kind: StorageKind = StorageKind.LOCAL


@dataclass(frozen=True)
class OwnerInfo:
    """Canonical location of an accessed resource."""

    path: str
    owner: str
    resource_id: int
    is_container: bool


__all__ = ["Node", "OwnerInfo", "StorageKind"]
