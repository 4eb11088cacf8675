"""Shared constants: class lists, file extensions and output names.

Centralizes the configuration shared by the reader, the resolution pass and
the output writers.
"""

import re

from rbxmx_repo.domain.enums import ScriptClassEnum

# ── Classes ─────────────────────────────────────────────────────────────

ROOT_CLASS = 'ROOT'
DEFAULT_CLASS = 'Folder'

SCRIPT_CLASSES: frozenset[str] = frozenset(c.value for c in ScriptClassEnum)

# Top-level services reported by class name in the manifest and used as
# directory names regardless of their Name property.
SERVICE_ROOTS: tuple[str, ...] = (
    'Workspace',
    'ServerScriptService',
    'ServerStorage',
    'ReplicatedStorage',
    'StarterPlayer',
    'StarterGui',
    'StarterPack',
    'Lighting',
    'SoundService',
    'Players',
    'Teams',
    'TextChatService',
    'Chat',
)

# Services whose non-script children are written as standalone assets.
ASSET_SERVICES: frozenset[str] = frozenset({
    'Workspace',
    'ServerStorage',
    'ReplicatedStorage',
})

# ── Script File Naming ──────────────────────────────────────────────────

SCRIPT_EXTENSIONS: dict[str, str] = {
    ScriptClassEnum.SCRIPT.value: '.server.lua',
    ScriptClassEnum.LOCAL_SCRIPT.value: '.client.lua',
    ScriptClassEnum.MODULE_SCRIPT.value: '.lua',
}
PLAIN_EXTENSION = '.lua'
ENTRY_FILE_BASENAME = 'init'

# ── Names ───────────────────────────────────────────────────────────────

INVALID_NAME_CHARS_RE = re.compile(r'[\\/:*?"<>|]')
WHITESPACE_RUN_RE = re.compile(r'\s+')
DOTS_ONLY_RE = re.compile(r'\.+')
FALLBACK_NAME = 'Instance'

# ── Output Layout ───────────────────────────────────────────────────────

SRC_DIR = 'src'
ASSETS_DIR = 'assets'
ASSET_EXTENSION = '.rbxmx'
MANIFEST_FILENAME = '_manifest.json'
ROOT_DIR_KEY = '.'
