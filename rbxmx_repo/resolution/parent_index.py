"""Reverse lookup from an instance to its parent.

Nodes only link to their children, so ancestor walks need an index built
from the root. The index is derived data: build a new one for every export.
"""

from rbxmx_repo.domain.constants import SERVICE_ROOTS
from rbxmx_repo.domain.models import InstanceNode


class ParentIndex:
    """Maps node id -> parent node for one instance tree."""

    def __init__(self, root: InstanceNode):
        self._root = root
        self._parents: dict[int, InstanceNode] = {}
        self._map(root)

    def _map(self, node: InstanceNode) -> None:
        for child in node.children:
            self._parents[child.id] = node
            self._map(child)

    def parent_of(self, node: InstanceNode) -> InstanceNode | None:
        return self._parents.get(node.id)

    def ancestors(self, node: InstanceNode) -> list[InstanceNode]:
        """Ancestors below the root, outermost first."""
        chain: list[InstanceNode] = []
        parent = self.parent_of(node)
        while parent is not None and not parent.is_root:
            chain.append(parent)
            parent = self.parent_of(parent)
        chain.reverse()
        return chain

    def path_segments(self, node: InstanceNode) -> list[str]:
        """Assigned segments from the top-level ancestor down to ``node``."""
        chain = self.ancestors(node) + [node]
        return [n.path_segment for n in chain if n.path_segment]

    def service_root(self, node: InstanceNode) -> str:
        """Name the top-level container ``node`` lives under.

        Known services are reported by class name; any other top-level
        container by its display name.
        """
        ancestors = self.ancestors(node)
        top = ancestors[0] if ancestors else node
        if top.class_name in SERVICE_ROOTS:
            return top.class_name
        return top.name
