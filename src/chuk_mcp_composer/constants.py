"""
Constants and enums for the composer.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum, IntEnum


class PartRole(str, Enum):
    """
    The four voices of a generated arrangement.

    Order matters: parts are asked for events in this order every beat.
    """

    CHORDS = "chords"  # Chordal accompaniment
    BASS = "bass"  # Monophonic voice-led bass
    MELODY = "melody"  # Lead line with ornaments
    DRUMS = "drums"  # Percussion


class ProgressionStyle(str, Enum):
    """Transition policy for the chord progression state machine."""

    ROCK = "rock"  # Weighted freeform walk (name is historical)
    ASCENDING = "ascending"  # Step up one degree per bar
    CIRCLE = "circle"  # Descending fifths, sometimes dominant sevenths

    @classmethod
    def parse(cls, name: str) -> "ProgressionStyle":
        """Parse a style name, case-insensitively."""
        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(ErrorMessages.INVALID_PROGRESSION.format(progression=name))


class HeaderMode(IntEnum):
    """SMF header format word."""

    SINGLE_TRACK = 0
    SIMULTANEOUS_TRACKS = 1
    INDEPENDENT_TRACKS = 2


class GMProgram(IntEnum):
    """Program change numbers offered for the melodic parts."""

    PIANO = 1
    ELECTRIC_PIANO = 5
    TRUMPET = 57
    SAXOPHONE = 67
    SQUARE_LEAD = 81
    ACOUSTIC_BASS = 33
    ELECTRIC_BASS = 34
    CELLO = 43


class GMDrumNote(IntEnum):
    """General MIDI drum note numbers used by the drummer."""

    KICK_1 = 35
    KICK_2 = 36
    SNARE = 38
    CLAP = 39
    CLOSED_HIHAT = 42
    OPEN_HIHAT = 46
    CRASH_1 = 49
    CRASH_2 = 57
    TAMBOURINE = 54
    COWBELL = 56


class DrumKit(IntEnum):
    """
    Drummer kit variants.

    The value is also the sign applied to velocity humanization.
    """

    STANDARD = 1  # Kicks, snares and claps; jitters upward
    AUXILIARY = -1  # Crashes, tambourine and cowbell; jitters downward


# Default MIDI channel assignments by part
DEFAULT_CHANNEL_MAP: dict[PartRole, int] = {
    PartRole.CHORDS: 1,
    PartRole.BASS: 2,
    PartRole.MELODY: 3,
    PartRole.DRUMS: 9,  # GM drums
}

# Ticks per quarter note written into the header
DEFAULT_DIVISION = 0x60

# Octave of the tonic (C3 = 48)
DEFAULT_TONIC_OCTAVE = 3


class ErrorMessages:
    """Standardized error messages."""

    INVALID_KEY = "Unknown key: '{key}'. Expected a pitch class like 'C', 'F#' or 'Bb'."
    INVALID_MODE = "Unknown mode: '{mode}'."
    INVALID_PROGRESSION = (
        "Unknown progression style: '{progression}'. Expected one of rock, ascending, circle."
    )
    INVALID_TIME_SIGNATURE = "Invalid time signature: '{time_signature}'."
    INVALID_INSTRUMENT = "Unknown instrument: '{instrument}'."
    INVALID_TEMPO = "Invalid tempo: {tempo}. Must be at least 1 BPM."
    PRESET_NOT_FOUND = "Preset '{name}' not found."


class SuccessMessages:
    """Standardized success messages."""

    ARRANGEMENT_GENERATED = "Generated {bars} bars ({events} events) to {path}."
