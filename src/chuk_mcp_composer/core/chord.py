"""
Chord primitives - ChordQuality.

Chords are stacks of intervals measured from the root.
"""

from __future__ import annotations

from enum import Enum

from .pitch import Interval, PitchClass


class ChordQuality(str, Enum):
    """
    A chord quality defined by its intervals from the root.

    Intervals are measured from the root, not stacked, and are always
    listed in ascending order.
    """

    MAJOR = "major"
    MINOR = "minor"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"
    MAJOR_7 = "major 7"
    MINOR_7 = "minor 7"
    DOMINANT_7 = "dominant 7"
    DIMINISHED_7 = "diminished 7"
    HALF_DIMINISHED_7 = "half-diminished 7"

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Intervals from the root, ascending."""
        return _INTERVALS[self]

    @property
    def symbol(self) -> str:
        """Chord symbol suffix (e.g. 'm7', 'dim')."""
        return _SYMBOLS[self]

    @property
    def is_diminished(self) -> bool:
        """True for the qualities that resolve upward by step."""
        return self in (
            ChordQuality.DIMINISHED,
            ChordQuality.DIMINISHED_7,
            ChordQuality.HALF_DIMINISHED_7,
        )

    def get_midi_notes(self, root_midi: int) -> list[int]:
        """
        Get MIDI note numbers for this chord.

        Args:
            root_midi: MIDI note number for the root

        Returns:
            List of MIDI note numbers, sorted ascending
        """
        return [root_midi + interval for interval in self.intervals]

    def name_chord(self, root_midi: int) -> str:
        """Chord symbol for a root pitch, e.g. 'G7' or 'F#m'."""
        return f"{PitchClass.from_midi(root_midi).spell()}{self.symbol}"


_INTERVALS: dict[ChordQuality, tuple[Interval, ...]] = {
    ChordQuality.MAJOR: (Interval.P1, Interval.M3, Interval.P5),
    ChordQuality.MINOR: (Interval.P1, Interval.m3, Interval.P5),
    ChordQuality.AUGMENTED: (Interval.P1, Interval.M3, Interval.m6),
    ChordQuality.DIMINISHED: (Interval.P1, Interval.m3, Interval.TT),
    ChordQuality.MAJOR_7: (Interval.P1, Interval.M3, Interval.P5, Interval.M7),
    ChordQuality.MINOR_7: (Interval.P1, Interval.m3, Interval.P5, Interval.m7),
    ChordQuality.DOMINANT_7: (Interval.P1, Interval.M3, Interval.P5, Interval.m7),
    ChordQuality.DIMINISHED_7: (Interval.P1, Interval.m3, Interval.TT, Interval.M6),
    ChordQuality.HALF_DIMINISHED_7: (Interval.P1, Interval.m3, Interval.TT, Interval.m7),
}

_SYMBOLS: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "m",
    ChordQuality.AUGMENTED: "aug",
    ChordQuality.DIMINISHED: "dim",
    ChordQuality.MAJOR_7: "maj7",
    ChordQuality.MINOR_7: "m7",
    ChordQuality.DOMINANT_7: "7",
    ChordQuality.DIMINISHED_7: "dim7",
    ChordQuality.HALF_DIMINISHED_7: "m7b5",
}
