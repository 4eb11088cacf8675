"""Filesystem primitives shared by the output writers."""

import os


class ExportError(Exception):
    """Error writing export output."""
    pass


def ensure_dir(path: str) -> None:
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise ExportError(f"Failed to create directory {path}: {e}") from e


def write_text(path: str, text: str) -> None:
    """Write ``text`` verbatim as UTF-8, creating parent directories.

    Newline translation is disabled so the bytes on disk match the text.
    """
    ensure_dir(os.path.dirname(path))
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
    except OSError as e:
        raise ExportError(f"Failed to write {path}: {e}") from e
