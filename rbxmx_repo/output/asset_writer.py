"""Writes non-script content as standalone model documents.

Output structure:
    output_dir/
    └── assets/{name}.rbxmx

Each asset is a copy of the source document's root element, its non-Item
top-level children, and a single <Item> subtree.
"""

import copy
import os
import xml.etree.ElementTree as ET

from rbxmx_repo.domain.constants import ASSET_EXTENSION, ASSET_SERVICES, ASSETS_DIR, ROOT_DIR_KEY
from rbxmx_repo.domain.models import InstanceNode, ParsedDocument
from rbxmx_repo.naming import NameRegistry, sanitize_name
from rbxmx_repo.output.file_writer import ensure_dir, write_text


def _used_namespaces(root: ET.Element) -> set[str]:
    used: set[str] = set()
    for elem in root.iter():
        for name in (elem.tag, *elem.attrib):
            if isinstance(name, str) and name.startswith('{'):
                used.add(name[1:name.index('}')])
    return used


class AssetWriter:
    """Re-serializes top-level model content into assets/."""

    def write_all(self, parsed: ParsedDocument, output_dir: str) -> list[str]:
        """Write one asset per qualifying subtree and return the written paths."""
        assets_dir = os.path.join(output_dir, ASSETS_DIR)
        ensure_dir(assets_dir)
        registry = NameRegistry()
        written: list[str] = []

        for service in parsed.root_node.children:
            if service.class_name not in ASSET_SERVICES:
                continue
            for child in service.children:
                if child.is_script or child.element is None:
                    continue
                asset_name = registry.allocate_segment(
                    ROOT_DIR_KEY, sanitize_name(child.name or child.class_name)
                )
                path = os.path.join(assets_dir, f'{asset_name}{ASSET_EXTENSION}')
                write_text(path, self.build_document(parsed, child))
                written.append(path)
        return written

    @staticmethod
    def build_document(parsed: ParsedDocument, node: InstanceNode) -> str:
        """Serialize ``node``'s original subtree as a standalone document."""
        root = ET.Element(parsed.root_tag, dict(parsed.root_attributes))
        for extra in parsed.root_extras:
            root.append(copy.deepcopy(extra))
        root.append(copy.deepcopy(node.element))

        # ET only declares namespaces that are referenced; keep the rest
        used = _used_namespaces(root)
        for prefix, uri in parsed.namespaces:
            if uri not in used:
                root.set(f'xmlns:{prefix}' if prefix else 'xmlns', uri)

        ET.indent(root, space='\t')
        return ET.tostring(root, encoding='unicode')
