"""
Rhythm primitives - TimeSignature.

Tick arithmetic lives in the codec (duration_ticks); this module only knows
how a bar is divided.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_composer.constants import ErrorMessages

# Beat units a time signature denominator may name
_VALID_BEAT_UNITS = (1, 2, 4, 8, 16, 32)


@dataclass(frozen=True)
class TimeSignature:
    """
    A time signature defining beats per bar and beat unit.

    The beat unit is the note value of one beat: 4 = quarter, 8 = eighth.

    Examples:
        TimeSignature(4, 4) = 4/4
        TimeSignature(6, 8) = 6/8
    """

    beats_per_bar: int
    beat_unit: int

    # Common time signatures (defined after class)
    COMMON_TIME: ClassVar[TimeSignature]  # 4/4
    WALTZ: ClassVar[TimeSignature]  # 3/4
    SIX_EIGHT: ClassVar[TimeSignature]  # 6/8
    FIVE_FOUR: ClassVar[TimeSignature]  # 5/4
    SEVEN_EIGHT: ClassVar[TimeSignature]  # 7/8

    def __post_init__(self) -> None:
        if self.beats_per_bar <= 0:
            raise ValueError(f"Beats per bar must be positive, got {self.beats_per_bar}")
        if self.beat_unit not in _VALID_BEAT_UNITS:
            raise ValueError(f"Unsupported beat unit: {self.beat_unit}")

    @property
    def half_bar_beat(self) -> int:
        """The 1-based beat that opens the second half of the bar."""
        return 1 + self.beats_per_bar // 2

    def __str__(self) -> str:
        return f"{self.beats_per_bar}/{self.beat_unit}"

    def __repr__(self) -> str:
        return f"TimeSignature({self.beats_per_bar}, {self.beat_unit})"

    @classmethod
    def parse(cls, notation: str) -> TimeSignature:
        """
        Parse a time signature from notation like '4/4', '3/4', '6/8'.

        Args:
            notation: Time signature string

        Returns:
            TimeSignature object
        """
        parts = notation.strip().split("/")
        if len(parts) != 2:
            raise ValueError(ErrorMessages.INVALID_TIME_SIGNATURE.format(time_signature=notation))

        try:
            beats_per_bar = int(parts[0])
            beat_unit = int(parts[1])
        except ValueError as e:
            raise ValueError(
                ErrorMessages.INVALID_TIME_SIGNATURE.format(time_signature=notation)
            ) from e

        return cls(beats_per_bar, beat_unit)


# Define common time signatures
TimeSignature.COMMON_TIME = TimeSignature(4, 4)
TimeSignature.WALTZ = TimeSignature(3, 4)
TimeSignature.SIX_EIGHT = TimeSignature(6, 8)
TimeSignature.FIVE_FOUR = TimeSignature(5, 4)
TimeSignature.SEVEN_EIGHT = TimeSignature(7, 8)
