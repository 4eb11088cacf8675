"""Builds the typed instance tree from parsed <Item> elements."""

import xml.etree.ElementTree as ET

from rbxmx_repo.domain.constants import DEFAULT_CLASS, ROOT_CLASS
from rbxmx_repo.domain.models import InstanceNode
from rbxmx_repo.domain.property_bag import PropertyBag


class NodeBuilder:
    """Converts <Item> elements into InstanceNodes.

    Identities come from a counter owned by this builder. ``build_root``
    resets it, so building the same document twice yields the same ids.
    """

    def __init__(self):
        self._next_id = 1

    def build_root(self, items: list[ET.Element]) -> InstanceNode:
        """Build the synthetic root node wrapping the top-level items."""
        self._next_id = 1
        return InstanceNode(
            id=0,
            class_name=ROOT_CLASS,
            name=ROOT_CLASS,
            children=[self.build(item) for item in items],
        )

    def build(self, item: ET.Element) -> InstanceNode:
        class_name = item.get('class') or DEFAULT_CLASS
        bag = PropertyBag.from_item(item)

        # an empty Name element counts as missing
        name = bag.get_string('Name') or class_name
        source = bag.get_string('Source')

        node = InstanceNode(
            id=self._next_id,
            class_name=class_name,
            name=name,
            properties={
                'Name': name,
                'Disabled': bag.get_bool('Disabled'),
                'Source': source if source is not None else '',
            },
            element=item,
        )
        self._next_id += 1

        node.children = [self.build(child) for child in item.findall('Item')]
        return node
