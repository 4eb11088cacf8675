"""Document reader for Roblox XML model and place files."""
import os
import xml.etree.ElementTree as ET

from rbxmx_repo.domain.models import ParsedDocument
from rbxmx_repo.node_builder import NodeBuilder


class DocumentReadError(Exception):
    """Error reading document."""
    pass


class DocumentReader:
    """Reads .rbxmx/.rbxlx documents into a ParsedDocument."""

    def __init__(self, node_builder: NodeBuilder | None = None):
        self._node_builder = node_builder or NodeBuilder()

    def read(self, path: str) -> ParsedDocument:
        """Read and parse a document.

        Raises:
            DocumentReadError: the file is missing, is not a regular file,
                or is not well-formed XML.
        """
        if not os.path.isfile(path):
            raise DocumentReadError(f"Input file not found: {path}")

        namespaces: list[tuple[str, str]] = []
        try:
            events = ET.iterparse(path, events=('start-ns',))
            for _, (prefix, uri) in events:
                namespaces.append((prefix, uri))
            root = events.root
        except ET.ParseError as e:
            raise DocumentReadError(f"Failed to parse {path}: {e}") from e
        except OSError as e:
            raise DocumentReadError(f"Failed to read {path}: {e}") from e

        if root is None:
            raise DocumentReadError(f"No root element found in {path}")

        items = root.findall('Item')
        extras = [child for child in root if child.tag != 'Item']

        return ParsedDocument(
            root_tag=root.tag,
            root_attributes=dict(root.attrib),
            root_extras=extras,
            root_items=items,
            root_node=self._node_builder.build_root(items),
            namespaces=namespaces,
            source_path=path,
        )
