"""
MCP tool implementations.

Tools are organized by domain:
- composition - Generate arrangements and write MIDI files
- presets - Preset discovery and saving
"""

from chuk_mcp_composer.tools.composition import register_composition_tools
from chuk_mcp_composer.tools.presets import register_preset_tools

__all__ = [
    "register_composition_tools",
    "register_preset_tools",
]
