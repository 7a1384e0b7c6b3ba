"""
Arrangement configuration - everything a generation run needs.

The configuration is plain data: a key, a mode, a progression style, a
time signature, tempo, length, instruments and a few performance knobs.
String fields are validated against the fixed vocabulary of the harmony
model and rejected if unknown.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_composer.constants import (
    DEFAULT_DIVISION,
    DEFAULT_TONIC_OCTAVE,
    DrumKit,
    ErrorMessages,
    GMProgram,
    ProgressionStyle,
)
from chuk_mcp_composer.core.pitch import PitchClass
from chuk_mcp_composer.core.rhythm import TimeSignature
from chuk_mcp_composer.core.scale import Mode


def parse_program(value: Any) -> int:
    """
    Resolve an instrument to a program number.

    Accepts a program number or a GMProgram name like 'electric_piano'.
    """
    if isinstance(value, GMProgram):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        name = value.strip()
        if name.isdigit():
            return int(name)
        key = name.upper().replace(" ", "_").replace("-", "_")
        if key in GMProgram.__members__:
            return int(GMProgram[key])
    raise ValueError(ErrorMessages.INVALID_INSTRUMENT.format(instrument=value))


class Instrumentation(BaseModel):
    """Program numbers for the three melodic parts."""

    chords: int = Field(int(GMProgram.PIANO), ge=0, le=127, description="Chordal part program")
    bass: int = Field(int(GMProgram.ACOUSTIC_BASS), ge=0, le=127, description="Bass program")
    melody: int = Field(int(GMProgram.SAXOPHONE), ge=0, le=127, description="Melody program")

    model_config = {"frozen": True}

    @field_validator("chords", "bass", "melody", mode="before")
    @classmethod
    def validate_program(cls, v: Any) -> int:
        """Allow instrument names as well as numbers."""
        return parse_program(v)


class ArrangementConfig(BaseModel):
    """
    Configuration for one generated arrangement.

    Defaults match a 12 bar, 150 BPM rock progression in C major.
    """

    name: str = Field("arrangement", description="Name used for output files")
    key: str = Field("C", description="Tonic pitch class (e.g., 'C', 'F#', 'Bb')")
    octave: int = Field(DEFAULT_TONIC_OCTAVE, ge=0, le=7, description="Octave of the tonic")
    mode: str = Field("major", description="Mode (major, dorian, ..., minor, locrian)")
    progression: str = Field("rock", description="Progression style (rock, ascending, circle)")
    time_signature: str = Field("4/4", description="Time signature")
    tempo: int = Field(150, ge=1, le=300, description="Tempo in BPM")
    bars: int = Field(12, ge=1, le=128, description="Length in bars")
    instruments: Instrumentation = Field(default_factory=Instrumentation)
    drum_kit: int = Field(1, ge=1, le=2, description="Drummer kit variant (1 or 2)")
    ornament_rate: int = Field(20, ge=0, le=100, description="Melody ornament chance (%)")
    skip_rate: int = Field(20, ge=0, le=100, description="Melody rest chance (%)")
    seed: int | None = Field(None, description="Random seed for reproducible output")
    division: int = Field(DEFAULT_DIVISION, ge=1, le=0x7FFF, description="Ticks per quarter")

    model_config = {"frozen": True}

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate key name."""
        try:
            PitchClass.parse(v)
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_KEY.format(key=v)) from e
        return v

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        """Validate mode name."""
        Mode.parse(v)
        return v

    @field_validator("progression")
    @classmethod
    def validate_progression(cls, v: str) -> str:
        """Validate progression style name."""
        ProgressionStyle.parse(v)
        return v

    @field_validator("time_signature")
    @classmethod
    def validate_time_signature(cls, v: str) -> str:
        """Validate time signature format."""
        TimeSignature.parse(v)
        return v

    def get_tonic(self) -> int:
        """MIDI pitch of the tonic."""
        return PitchClass.parse(self.key).to_midi(self.octave)

    def get_mode(self) -> Mode:
        """Get parsed Mode."""
        return Mode.parse(self.mode)

    def get_progression_style(self) -> ProgressionStyle:
        """Get parsed ProgressionStyle."""
        return ProgressionStyle.parse(self.progression)

    def get_time_signature(self) -> TimeSignature:
        """Get parsed TimeSignature."""
        return TimeSignature.parse(self.time_signature)

    def get_drum_kit(self) -> DrumKit:
        """Kit variant 1 is the standard kit, 2 the auxiliary one."""
        return DrumKit.STANDARD if self.drum_kit == 1 else DrumKit.AUXILIARY

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dictionary (preset format)."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> ArrangementConfig:
        """Create from a preset dictionary."""
        return cls.model_validate(data)
