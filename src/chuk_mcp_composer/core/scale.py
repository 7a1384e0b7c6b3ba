"""
Scale primitives - Mode and the diatonic degree tables.

All seven modes share one pair of eight-entry tables built on the major
scale (degree 8 restates degree 1 an octave up). A mode is a rotation into
those tables, so every lookup is a pure function of (mode, degree).
"""

from __future__ import annotations

from enum import Enum

from chuk_mcp_composer.constants import ErrorMessages

from .chord import ChordQuality
from .pitch import Interval

# Interval from the tonic for each degree, 1-8
SCALE_INTERVALS: tuple[Interval, ...] = (
    Interval.P1,
    Interval.M2,
    Interval.M3,
    Interval.P4,
    Interval.P5,
    Interval.M6,
    Interval.M7,
    Interval.P8,
)

# Diatonic triad quality built on each degree, 1-8
SCALE_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.MINOR,
    ChordQuality.MAJOR,
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
    ChordQuality.MAJOR,
)


class Mode(str, Enum):
    """The seven diatonic modes, in rotation order."""

    MAJOR = "major"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    MINOR = "minor"
    LOCRIAN = "locrian"

    @property
    def rotation(self) -> int:
        """Offset into the degree tables."""
        return list(Mode).index(self)

    @classmethod
    def parse(cls, name: str) -> Mode:
        """
        Parse a mode name like 'Major', 'dorian' or 'aeolian'.

        Args:
            name: Mode name (case-insensitive, church-mode aliases accepted)

        Returns:
            The parsed Mode
        """
        normalized = name.strip().lower().replace("_", " ")
        aliases = {
            "ionian": cls.MAJOR,
            "aeolian": cls.MINOR,
            "natural minor": cls.MINOR,
        }
        if normalized in aliases:
            return aliases[normalized]
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(ErrorMessages.INVALID_MODE.format(mode=name))


def clamp_degree(degree: int) -> int:
    """Normalize a scale degree into [1, 8] by adding or subtracting 7."""
    while degree < 1:
        degree += 7
    while degree > 8:
        degree -= 7
    return degree


def _table_index(mode: Mode, degree: int) -> int:
    return clamp_degree(degree + mode.rotation) - 1


def get_interval(mode: Mode, degree: int) -> Interval:
    """Interval from the tonic to a scale degree in a mode."""
    return SCALE_INTERVALS[_table_index(mode, degree)]


def get_quality(mode: Mode, degree: int) -> ChordQuality:
    """Natural chord quality on a scale degree in a mode."""
    return SCALE_QUALITIES[_table_index(mode, degree)]
