"""
Composition tools - MCP tools for generating arrangements.

Tools for generating a MIDI file from a preset and/or explicit settings,
and for previewing the chord progression a configuration produces.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_composer.compiler import ArrangementCompiler
from chuk_mcp_composer.constants import ErrorMessages, SuccessMessages
from chuk_mcp_composer.models.arrangement import ArrangementConfig
from chuk_mcp_composer.presets import PresetLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def build_config(
    preset_loader: PresetLoader,
    preset: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> ArrangementConfig:
    """
    Resolve a configuration from an optional preset plus overrides.

    None values in overrides are ignored, so tool arguments that were not
    given keep the preset (or default) value.

    Raises:
        ValueError: If the preset is unknown or a value fails validation
    """
    if preset:
        base = preset_loader.get_preset(preset)
        if base is None:
            raise ValueError(ErrorMessages.PRESET_NOT_FOUND.format(name=preset))
    else:
        base = ArrangementConfig()

    data = base.to_yaml_dict()
    for field_name, value in (overrides or {}).items():
        if value is None:
            continue
        if field_name == "instruments":
            data["instruments"] = {**data["instruments"], **value}
        else:
            data[field_name] = value

    return ArrangementConfig.from_yaml_dict(data)


def register_composition_tools(
    mcp: ChukMCPServer,
    preset_loader: PresetLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register composition tools with the MCP server.

    Args:
        mcp: The MCP server instance
        preset_loader: The preset loader
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    compiler = ArrangementCompiler()

    @mcp.tool  # type: ignore[arg-type]
    async def music_generate_arrangement(
        preset: str | None = None,
        key: str | None = None,
        mode: str | None = None,
        progression: str | None = None,
        time_signature: str | None = None,
        tempo: int | None = None,
        bars: int | None = None,
        chords_instrument: str | None = None,
        bass_instrument: str | None = None,
        melody_instrument: str | None = None,
        drum_kit: int | None = None,
        ornament_rate: int | None = None,
        skip_rate: int | None = None,
        seed: int | None = None,
        output_name: str | None = None,
    ) -> str:
        """
        Generate an arrangement and write it to a MIDI file.

        Starts from a preset (or the defaults: C major, rock progression,
        4/4, 150 BPM, 12 bars) and applies any explicit settings on top.
        The last two bars always cadence V7 - I.

        Args:
            preset: Optional preset name (see music_list_presets)
            key: Tonic pitch class (e.g., "C", "F#", "Bb")
            mode: major, dorian, phrygian, lydian, mixolydian, minor, locrian
            progression: rock, ascending or circle
            time_signature: Time signature like "4/4", "3/4", "7/8"
            tempo: Tempo in BPM (1-300)
            bars: Number of bars (1-128)
            chords_instrument: Program number or name for the chordal part
            bass_instrument: Program number or name for the bass
            melody_instrument: Program number or name for the melody
            drum_kit: Drummer variant, 1 or 2
            ornament_rate: Chance (%) that a melody note starts an ornament
            skip_rate: Chance (%) that a free melody beat is a rest
            seed: Random seed for reproducible output
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and a summary of the arrangement

        Example:
            music_generate_arrangement(key="D", mode="dorian", time_signature="3/4", seed=7)
        """
        try:
            instruments = {
                role: value
                for role, value in (
                    ("chords", chords_instrument),
                    ("bass", bass_instrument),
                    ("melody", melody_instrument),
                )
                if value is not None
            }
            config = build_config(
                preset_loader,
                preset,
                {
                    "key": key,
                    "mode": mode,
                    "progression": progression,
                    "time_signature": time_signature,
                    "tempo": tempo,
                    "bars": bars,
                    "instruments": instruments or None,
                    "drum_kit": drum_kit,
                    "ornament_rate": ornament_rate,
                    "skip_rate": skip_rate,
                    "seed": seed,
                },
            )

            result = compiler.compile(config)

            filename = f"{output_name or preset or config.name}.mid"
            output_path = result.save(output_dir / filename)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "arrangement": {
                        "key": config.key,
                        "mode": config.mode,
                        "progression": config.progression,
                        "time_signature": result.time_signature,
                        "tempo": result.tempo,
                        "bars": result.total_bars,
                        "seed": config.seed,
                    },
                    "chords": result.chord_symbols,
                    "compilation": {
                        "total_events": result.total_events,
                        "parts": result.parts_compiled,
                        "bytes": len(result.data),
                    },
                    "message": SuccessMessages.ARRANGEMENT_GENERATED.format(
                        bars=result.total_bars, events=result.total_events, path=filename
                    ),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate arrangement")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_generate_arrangement"] = music_generate_arrangement

    @mcp.tool  # type: ignore[arg-type]
    async def music_preview_progression(
        preset: str | None = None,
        key: str | None = None,
        mode: str | None = None,
        progression: str | None = None,
        bars: int | None = None,
        seed: int | None = None,
    ) -> str:
        """
        Preview the chord progression without writing a file.

        Args:
            preset: Optional preset name
            key: Tonic pitch class
            mode: Mode name
            progression: rock, ascending or circle
            bars: Number of bars
            seed: Random seed (use the same seed to generate the file later)

        Returns:
            JSON string with one chord per bar

        Example:
            music_preview_progression(progression="circle", bars=8, seed=3)
        """
        try:
            config = build_config(
                preset_loader,
                preset,
                {"key": key, "mode": mode, "progression": progression, "bars": bars, "seed": seed},
            )
            result = compiler.compile(config)

            return json.dumps(
                {
                    "status": "success",
                    "chords": [
                        {"bar": bar, "degree": step.degree, "symbol": step.symbol}
                        for bar, step in enumerate(result.progression, start=1)
                    ],
                    "count": len(result.progression),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to preview progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_preview_progression"] = music_preview_progression

    return tools
