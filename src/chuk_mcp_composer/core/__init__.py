"""
Core music primitives - the harmony model.

These are the invariants the generators compose on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Offsets from a chord root, unison to octave
- ChordQuality: Interval stacks defining chord types
- Mode: Rotations into the diatonic degree tables
- TimeSignature: Beats per bar and beat unit
- chance helpers: injectable randomness
"""

from chuk_mcp_composer.core.chance import (
    RandomSource,
    choose,
    make_rng,
    percent_chance,
    random_int,
)
from chuk_mcp_composer.core.chord import ChordQuality
from chuk_mcp_composer.core.pitch import Interval, PitchClass, fit_pitch
from chuk_mcp_composer.core.rhythm import TimeSignature
from chuk_mcp_composer.core.scale import (
    SCALE_INTERVALS,
    SCALE_QUALITIES,
    Mode,
    clamp_degree,
    get_interval,
    get_quality,
)

__all__ = [
    # Pitch
    "PitchClass",
    "Interval",
    "fit_pitch",
    # Chord
    "ChordQuality",
    # Scale
    "Mode",
    "SCALE_INTERVALS",
    "SCALE_QUALITIES",
    "clamp_degree",
    "get_interval",
    "get_quality",
    # Rhythm
    "TimeSignature",
    # Chance
    "RandomSource",
    "choose",
    "make_rng",
    "percent_chance",
    "random_int",
]
