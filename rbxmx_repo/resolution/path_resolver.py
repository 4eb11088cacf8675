"""Assigns a unique directory segment to every node of the instance tree."""

import posixpath

from rbxmx_repo.domain.constants import ROOT_DIR_KEY, SERVICE_ROOTS
from rbxmx_repo.domain.models import InstanceNode
from rbxmx_repo.naming import NameRegistry, sanitize_name


class PathResolver:
    """Walks the tree in document order and sets ``path_segment`` on each node.

    Top-level services are named after their class; everything else after its
    sanitized display name. Siblings that collide are suffixed by the
    registry.
    """

    def __init__(self, registry: NameRegistry | None = None):
        self._registry = registry or NameRegistry()

    def assign(self, root: InstanceNode) -> None:
        self._assign_children(root, '')

    def _assign_children(self, node: InstanceNode, parent_path: str) -> None:
        for child in node.children:
            is_service_root = node.is_root and child.class_name in SERVICE_ROOTS
            base_name = sanitize_name(child.class_name if is_service_root else child.name or child.class_name)
            segment = self._registry.allocate_segment(parent_path or ROOT_DIR_KEY, base_name)
            child.path_segment = segment
            self._assign_children(child, posixpath.join(parent_path, segment))
