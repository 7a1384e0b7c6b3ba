"""
Part base class - the contract every voice implements.

A part is asked once per beat for the notes it wants to add to the bar's
chord. Parts keep whatever memory they need across bars as instance state.
"""

from __future__ import annotations

from chuk_mcp_composer.compiler.codec import duration_ticks
from chuk_mcp_composer.compiler.midi import Absolute, NoteEvent, RelativeToRoot
from chuk_mcp_composer.constants import DEFAULT_DIVISION, PartRole
from chuk_mcp_composer.core import ChordQuality, RandomSource, TimeSignature


class Part:
    """
    One voice of the arrangement.

    The base implementation plays nothing.
    """

    role: PartRole | None = None

    def __init__(
        self,
        channel: int,
        time_sig: TimeSignature,
        rng: RandomSource,
        division: int = DEFAULT_DIVISION,
    ):
        """
        Initialize the part.

        Args:
            channel: MIDI channel the part plays on
            time_sig: Time signature of the arrangement
            rng: Random source for the part's choices
            division: Ticks per quarter note
        """
        self.channel = channel
        self.time_sig = time_sig
        self.rng = rng
        self.division = division
        self.final_bar = False

    @property
    def beat_ticks(self) -> int:
        """Length of one beat in ticks."""
        return duration_ticks(self.time_sig.beat_unit, ticks_per_quarter=self.division)

    def produce_events(
        self,
        bar: int,
        beat: int,
        root: int,
        quality: ChordQuality,
    ) -> list[NoteEvent]:
        """
        Notes for one beat.

        Args:
            bar: 1-based bar number
            beat: 1-based beat within the bar
            root: MIDI pitch of the chord root
            quality: Chord quality for the bar

        Returns:
            Zero or more chord members
        """
        return []

    def member(
        self,
        pitch: Absolute | RelativeToRoot,
        beat: int,
        velocity: int | None = None,
        duration: int | None = None,
    ) -> NoteEvent:
        """Build a chord member on this part's channel at the start of a beat."""
        return NoteEvent(
            pitch=pitch,
            velocity=velocity,
            duration=duration,
            offset=self.beat_ticks * (beat - 1),
            channel=self.channel,
        )
