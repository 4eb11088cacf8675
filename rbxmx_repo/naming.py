"""Name sanitizing and per-directory unique name allocation."""

import posixpath

from rbxmx_repo.domain.constants import (
    DOTS_ONLY_RE,
    FALLBACK_NAME,
    INVALID_NAME_CHARS_RE,
    ROOT_DIR_KEY,
    WHITESPACE_RUN_RE,
)


def sanitize_name(value: str) -> str:
    """Make an instance name safe for use as a path segment or file name."""
    cleaned = INVALID_NAME_CHARS_RE.sub('_', value)
    cleaned = WHITESPACE_RUN_RE.sub(' ', cleaned).strip()
    # "." and ".." would resolve to the current or parent directory
    if not cleaned or DOTS_ONLY_RE.fullmatch(cleaned):
        return FALLBACK_NAME
    return cleaned


def dir_key(segments: list[str]) -> str:
    """Registry key for the directory made of ``segments``."""
    return posixpath.join(*segments) if segments else ROOT_DIR_KEY


class NameRegistry:
    """Tracks the names claimed in each directory.

    Collisions get the lowest free numeric suffix starting at 2
    (``Data``, ``Data_2``, ``Data_3``...). The result depends on claim
    order, so callers must allocate in document order.
    """

    def __init__(self):
        self._used: dict[str, set[str]] = {}

    def allocate_segment(self, key: str, base_name: str) -> str:
        return self._allocate(key, base_name, '')

    def allocate_file(self, key: str, base_name: str, extension: str) -> str:
        return self._allocate(key, base_name, extension)

    def _allocate(self, key: str, base_name: str, extension: str) -> str:
        used = self._used.setdefault(key, set())
        candidate = f"{base_name}{extension}"
        counter = 2
        while candidate in used:
            candidate = f"{base_name}_{counter}{extension}"
            counter += 1
        used.add(candidate)
        return candidate
