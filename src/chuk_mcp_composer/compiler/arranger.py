"""
Arrangement Compiler - generates an arrangement and encodes it to MIDI.

This is the central compilation pipeline:
    ArrangementConfig → chord per bar → NoteEvents per beat → SMF bytes

The compiler:
1. Writes tempo and one program change per melodic part
2. Steps the progression state machine once per bar, forcing a V7 - I
   cadence over the last two bars
3. Asks every part for its notes on every beat of the bar
4. Merges the bar's notes into one delta-time stream
5. Wraps the stream in a single-track MIDI file
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path

from mido import MidiFile

from chuk_mcp_composer.compiler.codec import duration_ticks
from chuk_mcp_composer.compiler.midi import (
    Note,
    build_chord_events,
    chord_end_time,
    encode_chord_events,
    encode_program_change,
    encode_tempo,
    midi_file,
)
from chuk_mcp_composer.compiler.progression import ChordGenerator, ChordStep
from chuk_mcp_composer.constants import DEFAULT_CHANNEL_MAP, DEFAULT_DIVISION, PartRole
from chuk_mcp_composer.core import (
    ChordQuality,
    Mode,
    RandomSource,
    get_interval,
    get_quality,
    make_rng,
)
from chuk_mcp_composer.models.arrangement import ArrangementConfig
from chuk_mcp_composer.parts import Bass, ChordalAccompaniment, Drummer, Melody, Part

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    """Result of generating an arrangement."""

    data: bytes
    progression: list[ChordStep]
    total_bars: int
    total_events: int
    parts_compiled: list[str]
    tempo: int
    time_signature: str
    division: int = DEFAULT_DIVISION
    chord_symbols: list[str] = field(init=False)

    def __post_init__(self) -> None:
        self.chord_symbols = [step.symbol for step in self.progression]

    @property
    def midi_file(self) -> MidiFile:
        """The generated bytes parsed back as a mido MidiFile."""
        return MidiFile(file=io.BytesIO(self.data))

    def save(self, path: Path | str) -> Path:
        """Write the MIDI bytes to disk."""
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.data)
        return output_path


def cadence_step(tonic: int, mode: Mode, bar: int, total_bars: int) -> ChordStep | None:
    """
    Forced chord for the last two bars, or None for a free bar.

    The penultimate bar is the dominant seventh on degree 5, the final bar
    the tonic chord.
    """
    if bar == total_bars:
        return ChordStep(
            degree=1,
            root=tonic + get_interval(mode, 1),
            quality=get_quality(mode, 1),
        )
    if bar == total_bars - 1:
        return ChordStep(
            degree=5,
            root=tonic + get_interval(mode, 5),
            quality=ChordQuality.DOMINANT_7,
        )
    return None


class ArrangementCompiler:
    """
    Generates and encodes arrangements.

    The compiler itself holds no per-run state; every call to compile
    builds a fresh progression and fresh parts.
    """

    def __init__(self, division: int | None = None):
        """
        Initialize the compiler.

        Args:
            division: Ticks per quarter note; overrides the configured division
        """
        self.division = division

    def build_parts(
        self,
        config: ArrangementConfig,
        rng: RandomSource,
    ) -> list[Part]:
        """Create the four parts in the order they are asked for notes."""
        time_sig = config.get_time_signature()
        division = self.division or config.division
        return [
            ChordalAccompaniment(
                DEFAULT_CHANNEL_MAP[PartRole.CHORDS], time_sig, rng, division=division
            ),
            Bass(DEFAULT_CHANNEL_MAP[PartRole.BASS], time_sig, rng, division=division),
            Melody(
                DEFAULT_CHANNEL_MAP[PartRole.MELODY],
                time_sig,
                rng,
                division=division,
                ornament_rate=config.ornament_rate,
                skip_rate=config.skip_rate,
            ),
            Drummer(
                DEFAULT_CHANNEL_MAP[PartRole.DRUMS],
                time_sig,
                rng,
                division=division,
                kit=config.get_drum_kit(),
            ),
        ]

    def compile(
        self,
        config: ArrangementConfig,
        rng: RandomSource | None = None,
    ) -> CompileResult:
        """
        Generate an arrangement.

        Args:
            config: The arrangement configuration
            rng: Random source; defaults to one seeded from config.seed

        Returns:
            CompileResult with the MIDI bytes and a summary
        """
        if rng is None:
            rng = make_rng(config.seed)

        division = self.division or config.division
        tonic = config.get_tonic()
        mode = config.get_mode()
        time_sig = config.get_time_signature()
        generator = ChordGenerator(tonic, mode, config.get_progression_style(), rng)
        parts = self.build_parts(config, rng)

        contents = bytearray(encode_tempo(config.tempo))
        contents += encode_program_change(
            config.instruments.chords, channel=DEFAULT_CHANNEL_MAP[PartRole.CHORDS]
        )
        contents += encode_program_change(
            config.instruments.bass, channel=DEFAULT_CHANNEL_MAP[PartRole.BASS]
        )
        contents += encode_program_change(
            config.instruments.melody, channel=DEFAULT_CHANNEL_MAP[PartRole.MELODY]
        )

        beat_ticks = duration_ticks(time_sig.beat_unit, ticks_per_quarter=division)
        bar_ticks = beat_ticks * time_sig.beats_per_bar
        progression: list[ChordStep] = []
        total_events = 0
        lead_in = 0

        for bar in range(1, config.bars + 1):
            step = cadence_step(tonic, mode, bar, config.bars)
            if step is None:
                step = generator.advance()
            if bar == config.bars:
                for part in parts:
                    part.final_bar = True
            progression.append(step)

            members = []
            for beat in range(1, time_sig.beats_per_bar + 1):
                for part in parts:
                    members.extend(part.produce_events(bar, beat, step.root, step.quality))

            root = Note(pitch=step.root, velocity=0, duration=bar_ticks)
            events = build_chord_events(root, members)
            contents += encode_chord_events(events, lead_in=lead_in)
            # Silence left at the end of this bar shifts the next one
            if events:
                lead_in = max(0, bar_ticks - chord_end_time(events))
            else:
                lead_in += bar_ticks
            total_events += len(members)

            logger.debug("Bar %d: %s, %d notes", bar, step.symbol, len(members))

        data = midi_file(bytes(contents), division=division)
        logger.info(
            "Generated %d bars of %s %s (%s), %d notes, %d bytes",
            config.bars,
            config.key,
            mode.value,
            config.progression,
            total_events,
            len(data),
        )

        return CompileResult(
            data=data,
            progression=progression,
            total_bars=config.bars,
            total_events=total_events,
            parts_compiled=[part.role.value for part in parts if part.role is not None],
            tempo=config.tempo,
            time_signature=str(time_sig),
            division=division,
        )


def compile_arrangement(
    config: ArrangementConfig,
    output_path: Path | str | None = None,
    rng: RandomSource | None = None,
) -> CompileResult:
    """
    Convenience function to generate an arrangement.

    Args:
        config: Arrangement configuration
        output_path: Optional path to save the MIDI file
        rng: Optional random source (overrides config.seed)

    Returns:
        CompileResult with the MIDI bytes
    """
    compiler = ArrangementCompiler()
    result = compiler.compile(config, rng=rng)

    if output_path:
        result.save(output_path)

    return result
