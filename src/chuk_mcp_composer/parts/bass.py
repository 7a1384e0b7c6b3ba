"""
Bass - a monophonic line that moves to the nearest chord tone.
"""

from __future__ import annotations

from chuk_mcp_composer.compiler.midi import Absolute, NoteEvent
from chuk_mcp_composer.constants import PartRole
from chuk_mcp_composer.core import ChordQuality, Interval

from .base import Part

BASS_VELOCITY = 120


class Bass(Part):
    """
    Plays once per bar, on beat 1, for the whole bar.

    Voice-leading memory (last root, last pitch) is updated on every beat.
    """

    role = PartRole.BASS

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.last_root: int | None = None
        self.last_pitch: int | None = None

    def produce_events(
        self,
        bar: int,
        beat: int,
        root: int,
        quality: ChordQuality,
    ) -> list[NoteEvent]:
        pitch = self.choose_pitch(root, quality)
        self.last_root = root
        self.last_pitch = pitch

        if beat != 1:
            return []
        if pitch > Interval.P8:
            pitch -= Interval.P8
        return [self.member(Absolute(pitch), beat, velocity=BASS_VELOCITY)]

    def choose_pitch(self, root: int, quality: ChordQuality) -> int:
        """
        Pick the next bass pitch.

        The root on the final bar or with no history; the previous pitch when
        the root has not changed; otherwise the chord tone closest to the
        previous pitch, which may be the previous pitch itself. Ties go to the
        earlier interval in the chord.
        """
        if self.final_bar or self.last_pitch is None or self.last_root is None:
            return root
        if self.last_root == root:
            return self.last_pitch

        last_pitch = self.last_pitch
        return min(quality.get_midi_notes(root), key=lambda pitch: abs(pitch - last_pitch))
