"""Projects the instance tree onto the filesystem.

Output structure:
    output_dir/
    ├── _manifest.json
    ├── assets/{name}.rbxmx                  (keep_models only)
    └── src/{segments}/
        ├── {Name}.server.lua                script without children
        └── {Name}/
            ├── init.server.lua              script with children
            └── {Child}.lua                  nested scripts, same rules

Every script is written exactly once and gets one manifest entry.
"""

from __future__ import annotations

import os
import posixpath

from rbxmx_repo.domain.constants import (
    ENTRY_FILE_BASENAME,
    PLAIN_EXTENSION,
    SCRIPT_EXTENSIONS,
    SRC_DIR,
)
from rbxmx_repo.domain.models import (
    ExportOptions,
    ExportResult,
    InstanceNode,
    ManifestEntry,
    ParsedDocument,
)
from rbxmx_repo.naming import NameRegistry, dir_key, sanitize_name
from rbxmx_repo.output.asset_writer import AssetWriter
from rbxmx_repo.output.file_writer import ensure_dir, write_text
from rbxmx_repo.output.manifest_builder import ManifestBuilder
from rbxmx_repo.resolution.parent_index import ParentIndex
from rbxmx_repo.resolution.path_resolver import PathResolver


def script_extension(class_name: str, plain_lua: bool) -> str:
    if plain_lua:
        return PLAIN_EXTENSION
    return SCRIPT_EXTENSIONS.get(class_name, PLAIN_EXTENSION)


def collect_scripts(root: InstanceNode) -> list[InstanceNode]:
    """All script nodes in pre-order, document order."""
    scripts: list[InstanceNode] = []

    def _walk(node: InstanceNode) -> None:
        if node.is_script:
            scripts.append(node)
        for child in node.children:
            _walk(child)

    _walk(root)
    return scripts


class _ExportRun:
    """State for a single export: registries, parent index, emitted set."""

    def __init__(self, root: InstanceNode, options: ExportOptions):
        self.options = options
        self.index = ParentIndex(root)
        self.files = NameRegistry()
        self.emitted: set[int] = set()
        self.entries: list[ManifestEntry] = []
        PathResolver().assign(root)

    def export_script(self, script: InstanceNode) -> None:
        if script.id in self.emitted:
            return
        self.emitted.add(script.id)

        segments = self.index.path_segments(script)
        extension = script_extension(script.class_name, self.options.plain_lua)

        if not script.children:
            parent_segments = segments[:-1]
            file_name = self.files.allocate_file(
                dir_key(parent_segments), sanitize_name(script.name or script.class_name), extension
            )
            self._write(script, parent_segments, file_name)
            return

        # Owns children: becomes a directory with an entry file
        file_name = self.files.allocate_file(dir_key(segments), ENTRY_FILE_BASENAME, extension)
        self._write(script, segments, file_name)
        for child in script.children:
            if child.is_script:
                self.export_script(child)

    def _write(self, script: InstanceNode, segments: list[str], file_name: str) -> None:
        path = os.path.join(self.options.out_dir, SRC_DIR, *segments, file_name)
        write_text(path, script.source)
        self.entries.append(ManifestEntry(
            name=script.name,
            class_name=script.class_name,
            service_root=self.index.service_root(script),
            output_path=posixpath.join(SRC_DIR, *segments, file_name),
            disabled=script.disabled,
        ))


class ScriptExporter:
    """Exports scripts, optional assets and the manifest for a parsed document."""

    def __init__(
        self,
        asset_writer: AssetWriter | None = None,
        manifest_builder: ManifestBuilder | None = None,
    ):
        self._asset_writer = asset_writer or AssetWriter()
        self._manifest_builder = manifest_builder or ManifestBuilder()

    def export(self, parsed: ParsedDocument, options: ExportOptions) -> ExportResult:
        ensure_dir(options.out_dir)
        run = _ExportRun(parsed.root_node, options)
        for script in collect_scripts(parsed.root_node):
            run.export_script(script)

        assets: list[str] = []
        if options.keep_models:
            assets = self._asset_writer.write_all(parsed, options.out_dir)

        manifest = self._manifest_builder.build(run.entries)
        manifest_path = self._manifest_builder.write(manifest, options.out_dir, pretty=options.pretty)

        return ExportResult(
            scripts_exported=len(run.entries),
            assets_exported=len(assets),
            manifest_path=manifest_path,
            output_dir=options.out_dir,
        )
