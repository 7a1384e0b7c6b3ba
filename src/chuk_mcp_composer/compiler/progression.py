"""
Chord progression state machine.

Walks scale degrees under one of three progression styles. Each call to
``advance`` reports the chord to play now and then moves to the next one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chuk_mcp_composer.constants import ProgressionStyle
from chuk_mcp_composer.core import (
    ChordQuality,
    Mode,
    RandomSource,
    clamp_degree,
    get_interval,
    get_quality,
    percent_chance,
    random_int,
)

logger = logging.getLogger(__name__)

# Rock-style weighted moves: (exclusive upper bound on a 0-99 draw, next degree).
ROCK_TRANSITIONS: dict[int, tuple[tuple[int, int], ...]] = {
    1: ((33, 2), (67, 4), (100, 6)),
    2: ((20, 4), (100, 5)),
    3: ((50, 4), (100, 6)),
    4: ((20, 6), (30, 1), (100, 5)),
    5: ((20, 6), (100, 1)),
    6: ((15, 7), (70, 2), (100, 4)),
    7: ((70, 1), (80, 3), (100, 4)),
    8: ((33, 2), (67, 4), (100, 6)),
}


@dataclass(frozen=True)
class ChordStep:
    """One chord of the progression."""

    degree: int  # 1-8, in the mode
    root: int  # MIDI pitch of the chord root
    quality: ChordQuality

    @property
    def symbol(self) -> str:
        """Chord symbol like 'Am' or 'G7'."""
        return self.quality.name_chord(self.root)


class ChordGenerator:
    """
    Produces chords one bar at a time.

    State is private to the instance and never shared between runs.
    """

    def __init__(
        self,
        tonic: int,
        mode: Mode,
        style: ProgressionStyle,
        rng: RandomSource,
    ):
        """
        Initialize at the tonic chord.

        Args:
            tonic: MIDI pitch of the tonic
            mode: Mode used for degree lookups
            style: Transition policy, fixed for the run
            rng: Random source for weighted choices
        """
        self.tonic = tonic
        self.mode = mode
        self.style = style
        self.rng = rng
        self.degree = 1
        self.quality = self.natural()

    def natural(self) -> ChordQuality:
        """Natural chord quality of the current degree."""
        return get_quality(self.mode, self.degree)

    def current(self) -> ChordStep:
        """The chord the next advance() will report."""
        root = self.tonic + get_interval(self.mode, self.degree)
        return ChordStep(degree=self.degree, root=root, quality=self.quality)

    def advance(self) -> ChordStep:
        """Return the current chord, then transition to the next one."""
        step = self.current()

        if self.style == ProgressionStyle.ASCENDING:
            self.degree += 1
            self.quality = self.natural()
        elif self.style == ProgressionStyle.CIRCLE:
            self.degree -= 4
            self.quality = (
                ChordQuality.DOMINANT_7 if percent_chance(self.rng, 50) else self.natural()
            )
        else:
            self._advance_rock()

        self.degree = clamp_degree(self.degree)
        logger.debug("Chord %s (degree %d) -> degree %d", step.symbol, step.degree, self.degree)
        return step

    def _advance_rock(self) -> None:
        if self.quality == ChordQuality.DOMINANT_7:
            # Resolve down a fifth
            self.degree -= 4
        elif self.quality.is_diminished:
            self.degree += 1
        else:
            transitions = ROCK_TRANSITIONS.get(clamp_degree(self.degree))
            if transitions is None:
                self.degree = 1
            else:
                draw = random_int(self.rng, 100)
                self.degree = next(target for bound, target in transitions if draw < bound)
        self.quality = self.natural()
