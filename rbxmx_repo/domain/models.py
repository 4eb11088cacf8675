"""Shared data models used across reader, resolution and output modules."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any

from rbxmx_repo.domain.constants import ROOT_CLASS, SCRIPT_CLASSES


@dataclass
class InstanceNode:
    """One instance of the source tree.

    Children are owned exclusively by their parent. Nodes carry no parent
    reference; ancestor queries go through a ParentIndex built per export.
    """

    id: int
    class_name: str
    name: str
    properties: dict[str, Any] = field(default_factory=dict)
    children: list['InstanceNode'] = field(default_factory=list)
    path_segment: str | None = None
    element: ET.Element | None = field(default=None, repr=False)

    @property
    def is_root(self) -> bool:
        return self.class_name == ROOT_CLASS

    @property
    def is_script(self) -> bool:
        return self.class_name in SCRIPT_CLASSES

    @property
    def source(self) -> str:
        return str(self.properties.get('Source') or '')

    @property
    def disabled(self) -> bool:
        return bool(self.properties.get('Disabled'))


@dataclass
class ParsedDocument:
    """A parsed model/place document."""

    root_tag: str
    root_attributes: dict[str, str]
    root_extras: list[ET.Element]
    root_items: list[ET.Element]
    root_node: InstanceNode
    namespaces: list[tuple[str, str]] = field(default_factory=list)
    source_path: str = ''


@dataclass
class ManifestEntry:
    """Manifest record for one exported script."""

    name: str
    class_name: str
    service_root: str
    output_path: str
    disabled: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'className': self.class_name,
            'serviceRoot': self.service_root,
            'outputPath': self.output_path,
            'disabled': self.disabled,
        }


@dataclass
class ExportOptions:
    """Options controlling the export output."""

    out_dir: str
    keep_models: bool = False
    plain_lua: bool = False
    pretty: bool = True


@dataclass
class ExportResult:
    """Result summary of an export run."""

    scripts_exported: int
    assets_exported: int
    manifest_path: str
    output_dir: str
