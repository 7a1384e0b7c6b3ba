#!/usr/bin/env python3
"""
Example: Generate arrangements from presets and explicit settings.

Run this script to create playable MIDI files you can open in any DAW.

Usage:
    python examples/generate_arrangement.py
    # Creates: examples/output/*.mid
"""

from pathlib import Path

from chuk_mcp_composer.compiler import compile_arrangement
from chuk_mcp_composer.models import ArrangementConfig
from chuk_mcp_composer.presets import PresetLoader


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Example 1: The defaults - 12 bars of rock changes in C major
    print("Generating default.mid...")
    result = compile_arrangement(ArrangementConfig(seed=1), output_dir / "default.mid")
    print(f"  Chords: {' '.join(result.chord_symbols)}")

    # Example 2: Every built-in preset
    loader = PresetLoader()
    for preset in loader.list_presets():
        config = loader.get_preset(preset.name)
        print(f"\nGenerating {preset.name}.mid ({preset.description})...")
        result = compile_arrangement(config, output_dir / f"{preset.name}.mid")
        print(f"  {result.total_bars} bars in {result.time_signature}")
        print(f"  {result.total_events} notes")

    # Example 3: Explicit settings
    print("\nGenerating custom.mid...")
    config = ArrangementConfig(
        name="custom",
        key="Eb",
        mode="mixolydian",
        progression="circle",
        time_signature="5/4",
        tempo=128,
        bars=16,
        instruments={"chords": "electric_piano", "bass": "electric_bass", "melody": "trumpet"},
        ornament_rate=40,
        seed=2024,
    )
    result = compile_arrangement(config, output_dir / "custom.mid")
    print(f"  Chords: {' '.join(result.chord_symbols)}")

    print(f"\nDone! Files written to {output_dir}")


if __name__ == "__main__":
    main()
