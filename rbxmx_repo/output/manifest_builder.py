"""Export manifest builder."""

import json
import os
from typing import Any

from rbxmx_repo.domain.constants import MANIFEST_FILENAME
from rbxmx_repo.domain.models import ManifestEntry
from rbxmx_repo.output.file_writer import write_text


class ManifestBuilder:
    """Builds and writes the list of exported scripts."""

    @staticmethod
    def build(entries: list[ManifestEntry]) -> list[dict[str, Any]]:
        return [entry.to_dict() for entry in entries]

    @staticmethod
    def write(manifest: list[dict[str, Any]], output_dir: str, pretty: bool = True) -> str:
        """Write the manifest at the export root and return its path."""
        path = os.path.join(output_dir, MANIFEST_FILENAME)
        write_text(path, json.dumps(manifest, indent=2 if pretty else None, ensure_ascii=False))
        return path
