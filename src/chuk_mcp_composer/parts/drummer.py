"""
Drummer - one hit per beat from a fixed kit.
"""

from __future__ import annotations

from chuk_mcp_composer.compiler.midi import Absolute, NoteEvent
from chuk_mcp_composer.constants import DrumKit, GMDrumNote, PartRole
from chuk_mcp_composer.core import ChordQuality, percent_chance, random_int

from .base import Part

DOWNBEAT_VELOCITY = 100
HALF_BAR_VELOCITY = 60
OFFBEAT_VELOCITY = 80
HUMANIZE_RANGE = 20

# (first choice, second choice) per kit and beat position
_DOWNBEAT = {
    DrumKit.STANDARD: (GMDrumNote.KICK_1, GMDrumNote.KICK_2),
    DrumKit.AUXILIARY: (GMDrumNote.CRASH_1, GMDrumNote.CRASH_2),
}
_OFFBEAT = {
    DrumKit.STANDARD: (GMDrumNote.SNARE, GMDrumNote.CLAP),
    DrumKit.AUXILIARY: (GMDrumNote.TAMBOURINE, GMDrumNote.COWBELL),
}
_HALF_BAR = (GMDrumNote.CLOSED_HIHAT, GMDrumNote.OPEN_HIHAT)


class Drummer(Part):
    """
    Kick or crash on the downbeat, hi-hat on the half bar, snare-ish hits
    elsewhere. Ignores harmony and plays through the final bar.
    """

    role = PartRole.DRUMS

    def __init__(self, *args, kit: DrumKit = DrumKit.STANDARD, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.kit = kit

    def produce_events(
        self,
        bar: int,
        beat: int,
        root: int,
        quality: ChordQuality,
    ) -> list[NoteEvent]:
        if beat == 1:
            choices = _DOWNBEAT[self.kit]
            velocity = DOWNBEAT_VELOCITY
        elif beat == self.time_sig.half_bar_beat:
            choices = _HALF_BAR
            velocity = HALF_BAR_VELOCITY
        else:
            choices = _OFFBEAT[self.kit]
            velocity = OFFBEAT_VELOCITY

        pitch = choices[0] if percent_chance(self.rng, 50) else choices[1]
        velocity += random_int(self.rng, HUMANIZE_RANGE) * self.kit.value
        return [
            self.member(
                Absolute(int(pitch)), beat, velocity=velocity, duration=self.beat_ticks
            )
        ]
