"""
Melody - a lead line with passing-tone ornaments.

Most beats play a random chord tone. Now and then the melody plays a
three-beat figure instead: a chord tone, a scale tone between it and the
neighbouring chord tone, then that neighbour.
"""

from __future__ import annotations

from enum import Enum

from chuk_mcp_composer.compiler.midi import Absolute, NoteEvent, RelativeToRoot
from chuk_mcp_composer.constants import PartRole
from chuk_mcp_composer.core import (
    SCALE_INTERVALS,
    ChordQuality,
    Interval,
    choose,
    percent_chance,
    random_int,
)

from .base import Part

ORNAMENT_START_VELOCITY = 80
ORNAMENT_VELOCITY = 60
FINAL_VELOCITY = 60
BASE_VELOCITY = 80
VELOCITY_SPREAD = 40


class OrnamentPhase(str, Enum):
    """Where the melody is inside a passing-tone figure."""

    IDLE = "idle"
    HOLDING = "holding"  # Start tone played, passing tone next
    RESOLVING = "resolving"  # Passing tone played, end tone next


def passing_tone(lower: int, upper: int) -> int:
    """
    Scale interval strictly between two chord intervals.

    Takes the highest scale interval more than a semitone above the lower
    tone and more than a semitone below the upper one; falls back to the
    lower tone an octave up when none fits.
    """
    tone = lower + Interval.P8
    for candidate in SCALE_INTERVALS:
        if lower + 1 < candidate < upper - 1:
            tone = candidate
    return tone


class Melody(Part):
    """Lead voice with ornamentation and rests."""

    role = PartRole.MELODY

    def __init__(
        self,
        *args,
        ornament_rate: int = 20,
        skip_rate: int = 20,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.ornament_rate = ornament_rate
        self.skip_rate = skip_rate
        self.phase = OrnamentPhase.IDLE
        self.start_tone = 0
        self.mid_tone = 0
        self.end_tone = 0

    def produce_events(
        self,
        bar: int,
        beat: int,
        root: int,
        quality: ChordQuality,
    ) -> list[NoteEvent]:
        if self.final_bar:
            return self._final_note(beat, root)

        if self.phase == OrnamentPhase.HOLDING:
            self.phase = OrnamentPhase.RESOLVING
            return [self._tone(self.mid_tone, beat, ORNAMENT_VELOCITY)]

        if self.phase == OrnamentPhase.RESOLVING:
            self.phase = OrnamentPhase.IDLE
            return [self._tone(self.end_tone, beat, ORNAMENT_VELOCITY)]

        beats_left = self.time_sig.beats_per_bar - beat
        if beats_left >= 2 and percent_chance(self.rng, self.ornament_rate):
            return [self._start_ornament(beat, quality)]

        return [self._free_note(beat, quality)]

    def _final_note(self, beat: int, root: int) -> list[NoteEvent]:
        if beat != 1:
            return []
        pitch = root
        if percent_chance(self.rng, 50):
            pitch += Interval.P8
        # Both draws are always taken
        if percent_chance(self.rng, 50) and pitch > Interval.P8:
            pitch -= Interval.P8
        return [self.member(Absolute(pitch), beat, velocity=FINAL_VELOCITY)]

    def _start_ornament(self, beat: int, quality: ChordQuality) -> NoteEvent:
        ascending = percent_chance(self.rng, 50)
        intervals = quality.intervals
        lower_index = random_int(self.rng, len(intervals) - 1)
        lower = intervals[lower_index]
        upper = intervals[lower_index + 1]

        self.mid_tone = passing_tone(lower, upper)
        self.start_tone = lower if ascending else upper
        self.end_tone = upper if ascending else lower
        self.phase = OrnamentPhase.HOLDING
        return self._tone(self.start_tone, beat, ORNAMENT_START_VELOCITY)

    def _free_note(self, beat: int, quality: ChordQuality) -> NoteEvent:
        velocity = BASE_VELOCITY - random_int(self.rng, VELOCITY_SPREAD)
        if beat % 2 != 0:
            velocity += 20
        if beat == 1:
            velocity += 20
        if beat == self.time_sig.half_bar_beat:
            velocity += 10
        if percent_chance(self.rng, self.skip_rate):
            velocity = 0  # Rest
        interval = choose(self.rng, quality.intervals)
        return self._tone(interval, beat, velocity)

    def _tone(self, interval: int, beat: int, velocity: int) -> NoteEvent:
        return self.member(
            RelativeToRoot(int(interval)),
            beat,
            velocity=velocity,
            duration=self.beat_ticks,
        )
