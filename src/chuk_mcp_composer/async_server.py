#!/usr/bin/env python3
"""
Async Composer MCP Server using chuk-mcp-server

This server provides MCP tools for generating procedural MIDI arrangements.
Each arrangement is a chord progression driven by a small state machine,
played by four parts (chords, bass, melody, drums) and written out as a
standard MIDI file.

The server provides tools for:
- Generating arrangements from presets and explicit settings
- Previewing chord progressions
- Preset discovery and saving
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_composer.presets import PresetLoader
from chuk_mcp_composer.server import OUTPUT_DIR_ENV, PRESETS_DIR_ENV, directory_from_env
from chuk_mcp_composer.tools import register_composition_tools, register_preset_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-composer")

# Paths - standard project structure unless overridden from the command line
BASE_PATH = Path.cwd()
PRESETS_DIR = directory_from_env(PRESETS_DIR_ENV, BASE_PATH / "presets")
OUTPUT_DIR = directory_from_env(OUTPUT_DIR_ENV, BASE_PATH / "output")
PRESETS_LIBRARY_PATH = Path(__file__).parent / "presets" / "library"

# Create loaders
preset_loader = PresetLoader(
    library_path=PRESETS_LIBRARY_PATH,
    project_path=PRESETS_DIR,
)

# Register all tools
composition_tools = register_composition_tools(mcp, preset_loader, OUTPUT_DIR)
preset_tools = register_preset_tools(mcp, preset_loader)

# Export tool functions for direct access
music_generate_arrangement = composition_tools["music_generate_arrangement"]
music_preview_progression = composition_tools["music_preview_progression"]

music_list_presets = preset_tools["music_list_presets"]
music_describe_preset = preset_tools["music_describe_preset"]
music_save_preset = preset_tools["music_save_preset"]
music_list_options = preset_tools["music_list_options"]

logger.info("CHUK Composer MCP Server initialized")
logger.info(f"  Presets library: {PRESETS_LIBRARY_PATH}")
logger.info(f"  Presets dir: {PRESETS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
