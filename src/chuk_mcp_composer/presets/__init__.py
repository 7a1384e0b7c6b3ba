"""
Preset system - named arrangement configurations stored as YAML.
"""

from chuk_mcp_composer.presets.loader import PresetLoader, PresetMetadata

__all__ = [
    "PresetLoader",
    "PresetMetadata",
]
