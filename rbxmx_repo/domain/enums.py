"""Domain enums for the rbxmx exporter."""
from enum import Enum


class ScriptClassEnum(Enum):
    """Instance classes that carry script source."""
    SCRIPT = "Script"
    LOCAL_SCRIPT = "LocalScript"
    MODULE_SCRIPT = "ModuleScript"
