"""
Chordal accompaniment - the full chord on every beat.
"""

from __future__ import annotations

from chuk_mcp_composer.compiler.midi import NoteEvent, RelativeToRoot
from chuk_mcp_composer.constants import PartRole
from chuk_mcp_composer.core import ChordQuality

from .base import Part

DOWNBEAT_VELOCITY = 80
HALF_BAR_VELOCITY = 70
OFFBEAT_VELOCITY = 60


class ChordalAccompaniment(Part):
    """Block chords, accented by beat position. Stateless."""

    role = PartRole.CHORDS

    def produce_events(
        self,
        bar: int,
        beat: int,
        root: int,
        quality: ChordQuality,
    ) -> list[NoteEvent]:
        if self.final_bar:
            if beat != 1:
                return []
            # Held to the end of the bar
            return [
                self.member(RelativeToRoot(interval), beat, velocity=self._velocity(beat))
                for interval in quality.intervals
            ]

        return [
            self.member(
                RelativeToRoot(interval),
                beat,
                velocity=self._velocity(beat),
                duration=self.beat_ticks,
            )
            for interval in quality.intervals
        ]

    def _velocity(self, beat: int) -> int:
        if beat == 1:
            return DOWNBEAT_VELOCITY
        if beat == self.time_sig.half_bar_beat:
            return HALF_BAR_VELOCITY
        return OFFBEAT_VELOCITY
