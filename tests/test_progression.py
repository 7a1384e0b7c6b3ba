"""
Tests for the chord progression state machine.

Scripted random sources pin every weighted choice, so each style's walk
is checked exactly.
"""

import random
from collections import Counter

from chuk_mcp_composer.compiler.progression import ROCK_TRANSITIONS, ChordGenerator
from chuk_mcp_composer.constants import ProgressionStyle
from chuk_mcp_composer.core import ChordQuality, Mode

C3 = 48


def walk(generator: ChordGenerator, count: int) -> list[tuple[int, str]]:
    steps = [generator.advance() for _ in range(count)]
    return [(step.degree, step.symbol) for step in steps]


class TestAscending:
    """Tests for the ascending style."""

    def test_climbs_one_degree_per_bar(self, scripted) -> None:
        """No draws are taken and degree 8 wraps to 2."""
        rng = scripted()
        generator = ChordGenerator(C3, Mode.MAJOR, ProgressionStyle.ASCENDING, rng)

        assert walk(generator, 9) == [
            (1, "C"),
            (2, "Dm"),
            (3, "Em"),
            (4, "F"),
            (5, "G"),
            (6, "Am"),
            (7, "Bdim"),
            (8, "C"),
            (2, "Dm"),
        ]

    def test_uses_mode_qualities(self, scripted) -> None:
        generator = ChordGenerator(C3, Mode.MINOR, ProgressionStyle.ASCENDING, scripted())
        assert generator.advance().quality == ChordQuality.MINOR


class TestCircle:
    """Tests for the circle-of-fifths style."""

    def test_descends_by_fifths(self, scripted) -> None:
        """Each step drops four degrees; a draw below 50 makes a dominant seventh."""
        rng = scripted(10, 90, 49)
        generator = ChordGenerator(C3, Mode.MAJOR, ProgressionStyle.CIRCLE, rng)

        assert walk(generator, 3) == [(1, "C"), (4, "F7"), (7, "Bdim")]
        assert generator.degree == 3
        assert generator.quality == ChordQuality.DOMINANT_7
        assert rng.exhausted


class TestRock:
    """Tests for the weighted rock style."""

    def test_scripted_walk(self, scripted) -> None:
        """Weighted moves follow the draws; diminished chords step up without a draw."""
        rng = scripted(50, 25, 10, 99, 5, 14, 0)
        generator = ChordGenerator(C3, Mode.MAJOR, ProgressionStyle.ROCK, rng)

        assert walk(generator, 8) == [
            (1, "C"),
            (4, "F"),
            (1, "C"),
            (2, "Dm"),
            (5, "G"),
            (6, "Am"),
            (7, "Bdim"),
            (8, "C"),
        ]
        assert rng.exhausted
        assert generator.degree == 2

    def test_dominant_resolves_down_a_fifth(self, scripted) -> None:
        generator = ChordGenerator(C3, Mode.MAJOR, ProgressionStyle.ROCK, scripted())
        generator.degree = 5
        generator.quality = ChordQuality.DOMINANT_7

        step = generator.advance()

        assert step.symbol == "G7"
        assert generator.degree == 1
        assert generator.quality == ChordQuality.MAJOR

    def test_degree_four_weights(self, scripted) -> None:
        """Over every possible draw, degree 4 goes to 6, 1 and 5 at 20/10/70."""
        targets: Counter[int] = Counter()
        for draw in range(100):
            generator = ChordGenerator(C3, Mode.MAJOR, ProgressionStyle.ROCK, scripted(draw))
            generator.degree = 4
            generator.quality = generator.natural()
            generator.advance()
            targets[generator.degree] += 1

        assert targets == {6: 20, 1: 10, 5: 70}

    def test_tables_cover_all_draws(self) -> None:
        for transitions in ROCK_TRANSITIONS.values():
            assert transitions[-1][0] == 100
            bounds = [bound for bound, _ in transitions]
            assert bounds == sorted(bounds)


class TestDeterminism:
    """Same seed, same progression."""

    def test_same_seed_same_walk(self) -> None:
        for style in ProgressionStyle:
            first = ChordGenerator(C3, Mode.DORIAN, style, random.Random(42))
            second = ChordGenerator(C3, Mode.DORIAN, style, random.Random(42))
            assert walk(first, 32) == walk(second, 32)

    def test_degrees_stay_in_range(self) -> None:
        generator = ChordGenerator(C3, Mode.MAJOR, ProgressionStyle.ROCK, random.Random(3))
        for _ in range(200):
            step = generator.advance()
            assert 1 <= step.degree <= 8
            assert 1 <= generator.degree <= 8
