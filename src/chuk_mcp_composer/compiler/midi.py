"""
MIDI container builder - the end of the pipeline.

Builds Standard MIDI File bytes by hand: header and track chunks, notes,
program changes, tempo, and the chord merge that interleaves independently
timed voices into one delta-time stream.

Every event is self-contained (no running status) and note-off is written
as note-on with velocity 0. All operations are deterministic: same input,
same bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chuk_mcp_composer.compiler.codec import (
    encode_variable_length,
    to_bytes_be16,
    to_bytes_be32,
)
from chuk_mcp_composer.constants import DEFAULT_DIVISION, ErrorMessages, HeaderMode
from chuk_mcp_composer.core.pitch import fit_pitch

if TYPE_CHECKING:
    from collections.abc import Sequence

HEADER_TYPE = b"MThd"
TRACK_TYPE = b"MTrk"
HEADER_LENGTH = b"\x00\x00\x00\x06"
END_OF_TRACK = b"\x00\xff\x2f\x00"
TEMPO_PREFIX = b"\x00\xff\x51\x03"

# Status bytes, OR'd with a 0-15 channel
NOTE_ON = 0x90
PROGRAM_CHANGE = 0xC0

# GM Drum channel (0-indexed, so 9 = channel 10)
DRUM_CHANNEL = 9

MICROSECONDS_PER_MINUTE = 60_000_000


def _check_channel(channel: int) -> None:
    if not 0 <= channel <= 15:
        raise ValueError(f"Channel must be 0-15, got {channel}")


@dataclass(frozen=True)
class Note:
    """
    A single note, or the root of a chord.

    Chord members that leave velocity, duration or channel unset inherit
    them from the root.
    """

    pitch: int  # MIDI note number (0-127)
    velocity: int  # 0-127
    duration: int  # Ticks
    offset: int = 0  # Ticks after the previous event
    channel: int = 0  # 0-15 (9 = drums)

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if self.duration < 0:
            raise ValueError(f"Duration must be >= 0, got {self.duration}")
        if self.offset < 0:
            raise ValueError(f"Offset must be >= 0, got {self.offset}")
        _check_channel(self.channel)


@dataclass(frozen=True)
class Absolute:
    """A chord member pitch given as a MIDI note number."""

    pitch: int


@dataclass(frozen=True)
class RelativeToRoot:
    """A chord member pitch given as an interval above the chord root."""

    interval: int


@dataclass(frozen=True)
class NoteEvent:
    """
    A chord member emitted by a part.

    Offset is measured from the start of the chord (the bar), not from the
    previous event. Unset fields follow the root note.
    """

    pitch: Absolute | RelativeToRoot
    velocity: int | None = None
    duration: int | None = None
    offset: int = 0
    channel: int | None = None

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"Offset must be >= 0, got {self.offset}")
        if self.duration is not None and self.duration < 0:
            raise ValueError(f"Duration must be >= 0, got {self.duration}")
        if self.channel is not None:
            _check_channel(self.channel)


@dataclass(frozen=True)
class ChordBuildEvent:
    """A resolved note-on (or note-off, velocity 0) at an absolute tick."""

    pitch: int
    velocity: int
    time: int
    channel: int


def header_chunk(
    mode: HeaderMode = HeaderMode.SINGLE_TRACK,
    track_count: int = 1,
    division: int = DEFAULT_DIVISION,
) -> bytes:
    """
    Build the 14-byte header chunk.

    Args:
        mode: SMF format (single, simultaneous or independent tracks)
        track_count: Number of track chunks; always 1 in single-track mode
        division: Ticks per quarter note

    Returns:
        Header chunk bytes
    """
    if mode == HeaderMode.SINGLE_TRACK:
        track_count = 1
    return (
        HEADER_TYPE
        + HEADER_LENGTH
        + to_bytes_be16(int(mode))
        + to_bytes_be16(track_count)
        + to_bytes_be16(division)
    )


def track_chunk(contents: bytes) -> bytes:
    """Wrap event bytes in a track chunk terminated by end-of-track."""
    body = contents + END_OF_TRACK
    return TRACK_TYPE + to_bytes_be32(len(body)) + body


def midi_file(
    contents: bytes,
    mode: HeaderMode = HeaderMode.SINGLE_TRACK,
    division: int = DEFAULT_DIVISION,
) -> bytes:
    """Return a complete, playable MIDI file holding one track of contents."""
    return header_chunk(mode, 1, division) + track_chunk(contents)


def encode_note(
    pitch: int,
    velocity: int,
    duration: int,
    offset: int = 0,
    channel: int = 0,
) -> bytes:
    """
    Encode one note as a note-on / note-off pair.

    Notes concatenated this way play in sequence; use encode_chord to stack
    them.
    """
    _check_channel(channel)
    status = NOTE_ON | channel
    return (
        encode_variable_length(offset)
        + bytes([status, pitch, velocity])
        + encode_variable_length(duration)
        + bytes([status, pitch, 0])
    )


def encode_program_change(program: int, offset: int = 0, channel: int = 0) -> bytes:
    """Change the instrument used on a channel."""
    _check_channel(channel)
    if not 0 <= program <= 127:
        raise ValueError(f"Program must be 0-127, got {program}")
    return encode_variable_length(offset) + bytes([PROGRAM_CHANGE | channel, program])


def encode_tempo(bpm: int) -> bytes:
    """Set-tempo meta event at delta 0."""
    if bpm < 1:
        raise ValueError(ErrorMessages.INVALID_TEMPO.format(tempo=bpm))
    microseconds = MICROSECONDS_PER_MINUTE // bpm
    return TEMPO_PREFIX + to_bytes_be32(microseconds)[1:]


def resolve_member(root: Note, member: NoteEvent) -> tuple[ChordBuildEvent, ChordBuildEvent]:
    """
    Resolve a chord member against its root.

    Returns:
        (note-on, note-off) build events
    """
    if isinstance(member.pitch, Absolute):
        pitch = member.pitch.pitch
    else:
        pitch = root.pitch + member.pitch.interval
    pitch = fit_pitch(pitch)

    velocity = root.velocity if member.velocity is None else member.velocity
    velocity = max(0, min(127, velocity))
    duration = root.duration if member.duration is None else member.duration
    channel = root.channel if member.channel is None else member.channel

    start = member.offset
    end = start + duration
    return (
        ChordBuildEvent(pitch=pitch, velocity=velocity, time=start, channel=channel),
        ChordBuildEvent(pitch=pitch, velocity=0, time=end, channel=channel),
    )


def build_chord_events(root: Note, members: Sequence[NoteEvent]) -> list[ChordBuildEvent]:
    """
    Resolve every member and order the result by absolute tick.

    The root itself is not played unless it is also listed as a member
    (interval P1). The sort is stable: events at the same tick keep the
    order their members were given in.
    """
    events: list[ChordBuildEvent] = []
    for member in members:
        events.extend(resolve_member(root, member))
    events.sort(key=lambda event: event.time)
    return events


def encode_chord_events(events: Sequence[ChordBuildEvent], lead_in: int = 0) -> bytes:
    """
    Write sorted build events as delta-timed note-on messages.

    Args:
        events: Events sorted by time (see build_chord_events)
        lead_in: Extra ticks before the first event

    Returns:
        Encoded event bytes
    """
    output = bytearray()
    previous_time = -lead_in
    for event in events:
        delta = event.time - previous_time
        output += encode_variable_length(delta)
        output += bytes([NOTE_ON | event.channel, event.pitch, event.velocity])
        previous_time = event.time
    return bytes(output)


def encode_chord(root: Note, members: Sequence[NoteEvent]) -> bytes:
    """
    Encode a chord whose members derive their properties from the root.

    Each member becomes a note-on at its offset and a note-off at offset +
    duration; all of them are merged into a single delta-time stream.
    """
    return encode_chord_events(build_chord_events(root, members))


def chord_end_time(events: Sequence[ChordBuildEvent]) -> int:
    """Absolute tick of the last event, or 0 for an empty chord."""
    return events[-1].time if events else 0
