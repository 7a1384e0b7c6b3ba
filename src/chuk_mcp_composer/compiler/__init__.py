"""
Compilation pipeline - turns a configuration into MIDI bytes.

The pipeline:
    ArrangementConfig → ChordGenerator (chord per bar)
    → Parts (NoteEvents per beat)
    → chord merge (delta-timed events per bar)
    → MIDI file bytes
"""

# Import the byte layer first (no circular dependencies)
from chuk_mcp_composer.compiler.codec import (
    decode_variable_length,
    duration_ticks,
    encode_variable_length,
    read_variable_length,
    to_bytes_be16,
    to_bytes_be32,
)
from chuk_mcp_composer.compiler.midi import (
    DRUM_CHANNEL,
    Absolute,
    ChordBuildEvent,
    Note,
    NoteEvent,
    RelativeToRoot,
    build_chord_events,
    encode_chord,
    encode_chord_events,
    encode_note,
    encode_program_change,
    encode_tempo,
    header_chunk,
    midi_file,
    track_chunk,
)
from chuk_mcp_composer.compiler.progression import ChordGenerator, ChordStep


def __getattr__(name: str):
    """Lazy imports for arranger to avoid circular dependencies."""
    if name in ("ArrangementCompiler", "CompileResult", "compile_arrangement"):
        from chuk_mcp_composer.compiler.arranger import (
            ArrangementCompiler,
            CompileResult,
            compile_arrangement,
        )

        return {
            "ArrangementCompiler": ArrangementCompiler,
            "CompileResult": CompileResult,
            "compile_arrangement": compile_arrangement,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Arranger (lazy loaded)
    "ArrangementCompiler",
    "CompileResult",
    "compile_arrangement",
    # Codec
    "decode_variable_length",
    "duration_ticks",
    "encode_variable_length",
    "read_variable_length",
    "to_bytes_be16",
    "to_bytes_be32",
    # Container
    "DRUM_CHANNEL",
    "Absolute",
    "ChordBuildEvent",
    "Note",
    "NoteEvent",
    "RelativeToRoot",
    "build_chord_events",
    "encode_chord",
    "encode_chord_events",
    "encode_note",
    "encode_program_change",
    "encode_tempo",
    "header_chunk",
    "midi_file",
    "track_chunk",
    # Progression
    "ChordGenerator",
    "ChordStep",
]
