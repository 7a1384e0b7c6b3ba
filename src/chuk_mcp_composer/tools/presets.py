"""
Preset tools - MCP tools for preset discovery.

Tools for listing presets, describing one, saving a new one, and listing
the vocabulary every configuration draws from.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_composer.constants import ErrorMessages, GMProgram, ProgressionStyle
from chuk_mcp_composer.core import Mode, PitchClass, TimeSignature
from chuk_mcp_composer.presets import PresetLoader
from chuk_mcp_composer.tools.composition import build_config

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_preset_tools(
    mcp: ChukMCPServer,
    preset_loader: PresetLoader,
) -> dict[str, Any]:
    """
    Register preset tools with the MCP server.

    Args:
        mcp: The MCP server instance
        preset_loader: The preset loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_presets() -> str:
        """
        List available presets.

        Returns presets from the built-in library and the project.

        Returns:
            JSON string with list of preset summaries

        Example:
            music_list_presets()
        """
        try:
            presets = preset_loader.list_presets()

            return json.dumps(
                {
                    "status": "success",
                    "presets": [p.model_dump() for p in presets],
                    "count": len(presets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list presets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_presets"] = music_list_presets

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_preset(name: str) -> str:
        """
        Get the full configuration of a preset.

        Args:
            name: Preset name

        Returns:
            JSON string with the preset's description and settings

        Example:
            music_describe_preset(name="dorian_waltz")
        """
        try:
            preset = preset_loader.describe_preset(name)
            if preset is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.PRESET_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "preset": preset})
        except Exception as e:
            logger.exception("Failed to describe preset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_describe_preset"] = music_describe_preset

    @mcp.tool  # type: ignore[arg-type]
    async def music_save_preset(
        name: str,
        description: str = "",
        base: str | None = None,
        key: str | None = None,
        mode: str | None = None,
        progression: str | None = None,
        time_signature: str | None = None,
        tempo: int | None = None,
        bars: int | None = None,
    ) -> str:
        """
        Save a configuration as a project preset.

        Args:
            name: Preset name (used as the file name)
            description: One-line description
            base: Optional preset to start from
            key: Tonic pitch class
            mode: Mode name
            progression: rock, ascending or circle
            time_signature: Time signature like "3/4"
            tempo: Tempo in BPM
            bars: Number of bars

        Returns:
            JSON string with the saved file path

        Example:
            music_save_preset(name="slow-blues", key="E", tempo=70, bars=12)
        """
        try:
            config = build_config(
                preset_loader,
                base,
                {
                    "name": name,
                    "key": key,
                    "mode": mode,
                    "progression": progression,
                    "time_signature": time_signature,
                    "tempo": tempo,
                    "bars": bars,
                },
            )
            path = preset_loader.save_preset(name, config, description)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "preset": config.to_yaml_dict(),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to save preset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_save_preset"] = music_save_preset

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_options() -> str:
        """
        List the values accepted by the generation tools.

        Returns:
            JSON string with keys, modes, progression styles, example time
            signatures and named instruments

        Example:
            music_list_options()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "keys": [pc.spell() for pc in PitchClass],
                    "modes": [m.value for m in Mode],
                    "progressions": [p.value for p in ProgressionStyle],
                    "time_signatures": [
                        str(ts)
                        for ts in (
                            TimeSignature.COMMON_TIME,
                            TimeSignature.WALTZ,
                            TimeSignature.SIX_EIGHT,
                            TimeSignature.FIVE_FOUR,
                            TimeSignature.SEVEN_EIGHT,
                        )
                    ],
                    "instruments": {p.name.lower(): int(p) for p in GMProgram},
                    "drum_kits": [1, 2],
                }
            )
        except Exception as e:
            logger.exception("Failed to list options")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_options"] = music_list_options

    return tools
