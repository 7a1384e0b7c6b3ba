"""
Part generators - the four voices of an arrangement.

Every part answers ``produce_events(bar, beat, root, quality)`` with the
chord members it wants to add for that beat.
"""

from chuk_mcp_composer.parts.base import Part
from chuk_mcp_composer.parts.bass import Bass
from chuk_mcp_composer.parts.chordal import ChordalAccompaniment
from chuk_mcp_composer.parts.drummer import Drummer
from chuk_mcp_composer.parts.melody import Melody, OrnamentPhase, passing_tone

__all__ = [
    "Bass",
    "ChordalAccompaniment",
    "Drummer",
    "Melody",
    "OrnamentPhase",
    "Part",
    "passing_tone",
]
