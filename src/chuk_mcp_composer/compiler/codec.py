"""
Byte-level codec for Standard MIDI Files.

Variable-length quantities, big-endian fixed-width integers and note
duration arithmetic. Everything here is pure and works on ``bytes``.
"""

from __future__ import annotations

from chuk_mcp_composer.constants import DEFAULT_DIVISION

# Largest value a 4-byte variable-length quantity can carry
VLQ_MAX = 0x0FFFFFFF


def encode_variable_length(value: int) -> bytes:
    """
    Encode an integer as a MIDI variable-length quantity.

    Seven bits per byte, most significant group first, with the
    continuation bit (0x80) set on every byte except the last.

    Args:
        value: 0 to 0x0FFFFFFF

    Returns:
        1-4 bytes; 0 encodes as b"\\x00"
    """
    if not 0 <= value <= VLQ_MAX:
        raise ValueError(f"Variable-length value must be 0-{VLQ_MAX:#x}, got {value}")

    groups = [value & 0x7F]
    value >>= 7
    while value:
        groups.append((value & 0x7F) | 0x80)
        value >>= 7
    return bytes(reversed(groups))


def read_variable_length(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Read one variable-length quantity from a byte stream.

    Args:
        data: Buffer to read from
        offset: Index of the first byte of the quantity

    Returns:
        (value, number of bytes consumed)
    """
    value = 0
    for index in range(offset, len(data)):
        byte = data[index]
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return value, index - offset + 1
    raise ValueError("Truncated variable-length quantity")


def decode_variable_length(data: bytes) -> int:
    """Decode a variable-length quantity (inverse of encode_variable_length)."""
    value, _ = read_variable_length(data)
    return value


def to_bytes_be32(value: int) -> bytes:
    """Big-endian 4-byte encoding."""
    return (value & 0xFFFFFFFF).to_bytes(4, "big")


def to_bytes_be16(value: int) -> bytes:
    """Big-endian 2-byte encoding: the 32-bit form without its two high bytes."""
    return to_bytes_be32(value)[2:]


def duration_ticks(
    note_value: int,
    dotted: bool = False,
    ticks_per_quarter: int = DEFAULT_DIVISION,
) -> int:
    """
    Ticks for a note value.

    Args:
        note_value: 1 = whole, 4 = quarter, 8 = eighth; 0 means no duration
        dotted: Lengthen by half
        ticks_per_quarter: Division from the header chunk

    Returns:
        Tick count, truncated by integer division
    """
    if note_value == 0:
        return 0
    return ticks_per_quarter * 4 * (3 if dotted else 2) // 2 // note_value
