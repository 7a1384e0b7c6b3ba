"""
Pitch primitives - PitchClass and Interval.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the distance from a chord root in semitones.
"""

from __future__ import annotations

from enum import IntEnum

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Typographic accidentals accepted alongside their ASCII spellings
_ACCIDENTALS = {"♯": "#", "♭": "b"}

MIDI_PITCH_MAX = 127


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C3 and C4 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60, C3 = 48."""
        return self.value + (octave + 1) * 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db' or 'F♯'."""
        name = name.strip()
        for symbol, ascii_symbol in _ACCIDENTALS.items():
            name = name.replace(symbol, ascii_symbol)
        if name[:1].islower():
            name = name[:1].upper() + name[1:]

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (Cs, Ds, ...)
        for member in cls:
            if member.name.upper() == name.upper():
                return member

        raise ValueError(f"Unknown pitch class: {name}")


class Interval(IntEnum):
    """
    Offsets from a chord root in semitones, unison through octave.

    Values are plain ints so they add directly onto MIDI pitches.
    """

    P1 = 0
    m2 = 1
    M2 = 2
    m3 = 3
    M3 = 4
    P4 = 5
    TT = 6
    P5 = 7
    m6 = 8
    M6 = 9
    m7 = 10
    M7 = 11
    P8 = 12

    def __str__(self) -> str:
        return self.name


def fit_pitch(pitch: int) -> int:
    """
    Fold a computed pitch into the MIDI range by whole octaves.

    Octave shifts in the parts can push high tonics past 127; folding keeps
    the pitch class intact.
    """
    while pitch > MIDI_PITCH_MAX:
        pitch -= Interval.P8
    while pitch < 0:
        pitch += Interval.P8
    return pitch
