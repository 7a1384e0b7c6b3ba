"""
Tests for core music primitives.

Tests cover:
- PitchClass, Interval, fit_pitch (pitch.py)
- ChordQuality (chord.py)
- Mode and the degree tables (scale.py)
- TimeSignature (rhythm.py)
- Chance helpers (chance.py)
"""

import pytest

from chuk_mcp_composer.core import (
    ChordQuality,
    Interval,
    Mode,
    PitchClass,
    TimeSignature,
    choose,
    clamp_degree,
    fit_pitch,
    get_interval,
    get_quality,
    make_rng,
    percent_chance,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_to_midi(self) -> None:
        """Convert to MIDI note numbers."""
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.C.to_midi(3) == 48
        assert PitchClass.A.to_midi(4) == 69

    def test_from_midi(self) -> None:
        assert PitchClass.from_midi(55) == PitchClass.G
        assert PitchClass.from_midi(72) == PitchClass.C

    def test_parse(self) -> None:
        """Sharps, flats and typographic accidentals."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("F♯") == PitchClass.Fs
        assert PitchClass.parse("B♭") == PitchClass.As
        assert PitchClass.parse("bb") == PitchClass.As

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown pitch class"):
            PitchClass.parse("H")

    def test_spell(self) -> None:
        assert PitchClass.Fs.spell() == "F#"
        assert PitchClass.Fs.spell(prefer_flats=True) == "Gb"


class TestInterval:
    """Tests for Interval enum."""

    def test_values(self) -> None:
        assert Interval.P1 == 0
        assert Interval.P5 == 7
        assert Interval.P8 == 12
        assert len(Interval) == 13

    def test_str(self) -> None:
        assert str(Interval.m7) == "m7"

    def test_fit_pitch(self) -> None:
        """Out-of-range pitches fold by octaves."""
        assert fit_pitch(60) == 60
        assert fit_pitch(127) == 127
        assert fit_pitch(130) == 118
        assert fit_pitch(-5) == 7


class TestChordQuality:
    """Tests for ChordQuality enum."""

    def test_triads(self) -> None:
        assert ChordQuality.MAJOR.intervals == (0, 4, 7)
        assert ChordQuality.MINOR.intervals == (0, 3, 7)
        assert ChordQuality.DIMINISHED.intervals == (0, 3, 6)
        assert ChordQuality.AUGMENTED.intervals == (0, 4, 8)

    def test_sevenths(self) -> None:
        assert ChordQuality.DOMINANT_7.intervals == (0, 4, 7, 10)
        assert ChordQuality.MAJOR_7.intervals == (0, 4, 7, 11)
        assert ChordQuality.HALF_DIMINISHED_7.intervals == (0, 3, 6, 10)
        assert ChordQuality.DIMINISHED_7.intervals == (0, 3, 6, 9)

    def test_intervals_ascending(self) -> None:
        for quality in ChordQuality:
            assert list(quality.intervals) == sorted(quality.intervals)

    def test_name_chord(self) -> None:
        assert ChordQuality.DOMINANT_7.name_chord(55) == "G7"
        assert ChordQuality.MINOR.name_chord(50) == "Dm"
        assert ChordQuality.DIMINISHED.name_chord(59) == "Bdim"
        assert ChordQuality.MAJOR.name_chord(48) == "C"

    def test_is_diminished(self) -> None:
        assert ChordQuality.DIMINISHED.is_diminished
        assert ChordQuality.HALF_DIMINISHED_7.is_diminished
        assert not ChordQuality.DOMINANT_7.is_diminished

    def test_get_midi_notes(self) -> None:
        assert ChordQuality.MAJOR.get_midi_notes(60) == [60, 64, 67]


class TestDegrees:
    """Tests for degree clamping and the mode tables."""

    def test_clamp_closure(self) -> None:
        """Every integer lands in [1, 8] and clamping is idempotent."""
        for degree in range(-30, 31):
            clamped = clamp_degree(degree)
            assert 1 <= clamped <= 8
            assert clamp_degree(clamped) == clamped

    def test_clamp_values(self) -> None:
        assert clamp_degree(0) == 7
        assert clamp_degree(-3) == 4
        assert clamp_degree(8) == 8
        assert clamp_degree(9) == 2

    def test_major_scale(self) -> None:
        intervals = [get_interval(Mode.MAJOR, d) for d in range(1, 9)]
        assert intervals == [0, 2, 4, 5, 7, 9, 11, 12]

    def test_major_qualities(self) -> None:
        qualities = [get_quality(Mode.MAJOR, d) for d in range(1, 8)]
        assert qualities == [
            ChordQuality.MAJOR,
            ChordQuality.MINOR,
            ChordQuality.MINOR,
            ChordQuality.MAJOR,
            ChordQuality.MAJOR,
            ChordQuality.MINOR,
            ChordQuality.DIMINISHED,
        ]

    def test_degree_eight_restates_tonic(self) -> None:
        for mode in Mode:
            assert get_quality(mode, 8) == get_quality(mode, 1)

    def test_modes_rotate_tables(self) -> None:
        """A mode shifts lookups by its rotation."""
        assert get_quality(Mode.DORIAN, 1) == ChordQuality.MINOR
        assert get_interval(Mode.DORIAN, 1) == Interval.M2
        assert get_quality(Mode.MINOR, 1) == ChordQuality.MINOR
        assert get_quality(Mode.LOCRIAN, 1) == ChordQuality.DIMINISHED
        assert get_quality(Mode.LYDIAN, 1) == ChordQuality.MAJOR

    def test_lookups_accept_any_degree(self) -> None:
        """Out-of-range degrees are normalized before lookup."""
        assert get_quality(Mode.MAJOR, 0) == get_quality(Mode.MAJOR, 7)
        assert get_interval(Mode.MAJOR, -3) == get_interval(Mode.MAJOR, 4)


class TestMode:
    """Tests for Mode parsing."""

    def test_rotation_order(self) -> None:
        assert [m.rotation for m in Mode] == list(range(7))

    def test_parse(self) -> None:
        assert Mode.parse("Major") == Mode.MAJOR
        assert Mode.parse("mixolydian") == Mode.MIXOLYDIAN
        assert Mode.parse("aeolian") == Mode.MINOR
        assert Mode.parse("natural_minor") == Mode.MINOR
        assert Mode.parse("Ionian") == Mode.MAJOR

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown mode"):
            Mode.parse("blues")


class TestTimeSignature:
    """Tests for TimeSignature."""

    def test_parse(self) -> None:
        ts = TimeSignature.parse("7/8")
        assert ts.beats_per_bar == 7
        assert ts.beat_unit == 8
        assert str(ts) == "7/8"

    def test_half_bar_beat(self) -> None:
        assert TimeSignature.COMMON_TIME.half_bar_beat == 3
        assert TimeSignature.WALTZ.half_bar_beat == 2
        assert TimeSignature.SEVEN_EIGHT.half_bar_beat == 4

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid time signature"):
            TimeSignature.parse("4-4")
        with pytest.raises(ValueError):
            TimeSignature.parse("4/3")
        with pytest.raises(ValueError):
            TimeSignature(0, 4)


class TestChance:
    """Tests for the chance helpers."""

    def test_percent_chance_boundary(self, scripted) -> None:
        """A draw below the chance succeeds."""
        assert percent_chance(scripted(19), 20)
        assert not percent_chance(scripted(20), 20)
        assert not percent_chance(scripted(0), 0)

    def test_choose(self, scripted) -> None:
        assert choose(scripted(2), ["a", "b", "c"]) == "c"

    def test_seeded_rng_repeats(self) -> None:
        first = make_rng(5)
        second = make_rng(5)
        assert [first.randrange(100) for _ in range(10)] == [
            second.randrange(100) for _ in range(10)
        ]
