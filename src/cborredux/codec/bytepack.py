"""Byte-level packing utilities for CBOR items.

This module provides the append-only output buffer used by the encoder.
All multi-byte quantities are written big-endian regardless of host byte order.
"""

from __future__ import annotations

import struct

from ..exceptions import EncodeError, IntegerOverflow
from .constants import (
    AI_FLOAT32,
    AI_FLOAT64,
    AI_INDEFINITE,
    AI_UINT8,
    AI_UINT16,
    AI_UINT32,
    AI_UINT64,
    BREAK,
    MAX_INLINE,
    UINT64_MAX,
    MajorType,
)


class BytePacker:
    """Packs CBOR heads and payloads into a byte buffer.

    The buffer only grows; nothing written can be rewound. An encoder creates
    one packer per top-level encode call and discards it on failure.

    Example:
        >>> packer = BytePacker()
        >>> packer.write_head(MajorType.UNSIGNED_INT, 256)
        >>> packer.to_bytes()
        b'\\x19\\x01\\x00'
    """

    def __init__(self) -> None:
        """Initialize an empty byte packer."""
        self._buffer = bytearray()

    def write_initial_byte(self, major_type: int, additional_info: int) -> None:
        """Write one initial byte: 3-bit major type and 5-bit additional info.

        Args:
            major_type: CBOR major type (0-7)
            additional_info: Additional information field (0-31)

        Raises:
            ValueError: If either field is out of range
        """
        if not 0 <= major_type <= 7:
            raise ValueError(f"major_type must be 0-7, got {major_type}")
        if not 0 <= additional_info <= 31:
            raise ValueError(f"additional_info must be 0-31, got {additional_info}")

        self._buffer.append((major_type << 5) | additional_info)

    def write_head(self, major_type: int, value: int) -> None:
        """Write an item head carrying an unsigned quantity.

        The same rule serves integer values, string lengths, array/map counts
        and tag numbers: values up to 23 live in the initial byte, larger ones
        follow in the shortest of 1, 2, 4 or 8 bytes.

        Args:
            major_type: CBOR major type (0-7)
            value: Unsigned quantity (0 to 2**64-1)

        Raises:
            IntegerOverflow: If value is negative or exceeds 2**64-1
        """
        if value < 0 or value > UINT64_MAX:
            raise IntegerOverflow(value)

        if value <= MAX_INLINE:
            self.write_initial_byte(major_type, value)
        elif value < 0x100:
            self.write_initial_byte(major_type, AI_UINT8)
            self._buffer += struct.pack(">B", value)
        elif value < 0x10000:
            self.write_initial_byte(major_type, AI_UINT16)
            self._buffer += struct.pack(">H", value)
        elif value < 0x100000000:
            self.write_initial_byte(major_type, AI_UINT32)
            self._buffer += struct.pack(">I", value)
        else:
            # 8-byte form as two big-endian 32-bit halves
            self.write_initial_byte(major_type, AI_UINT64)
            self._buffer += struct.pack(">II", value >> 32, value & 0xFFFFFFFF)

    def write_float64(self, value: float) -> None:
        """Write an IEEE-754 double-precision float item (0xFB + 8 bytes)."""
        self.write_initial_byte(MajorType.SIMPLE, AI_FLOAT64)
        self._buffer += struct.pack(">d", value)

    def write_float32(self, value: float) -> None:
        """Write an IEEE-754 single-precision float item (0xFA + 4 bytes).

        Raises:
            EncodeError: If value is finite but too large for single precision
        """
        try:
            packed = struct.pack(">f", value)
        except OverflowError as err:
            raise EncodeError(f"Float32 value {value!r} exceeds single precision range") from err

        self.write_initial_byte(MajorType.SIMPLE, AI_FLOAT32)
        self._buffer += packed

    def write_simple(self, simple_value: int) -> None:
        """Write a one-byte simple value (false, true, null, undefined)."""
        self.write_initial_byte(MajorType.SIMPLE, simple_value)

    def write_indefinite(self, major_type: int) -> None:
        """Open an indefinite-length item of the given major type."""
        self.write_initial_byte(major_type, AI_INDEFINITE)

    def write_break(self) -> None:
        """Close the innermost indefinite-length item (0xFF)."""
        self._buffer.append(BREAK)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Write raw payload bytes.

        Args:
            data: Bytes to append verbatim
        """
        self._buffer += data

    def byte_length(self) -> int:
        """Return the current number of bytes written.

        Returns:
            Number of bytes in the buffer
        """
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return an immutable copy of the buffer.

        Returns:
            Packed bytes
        """
        return bytes(self._buffer)
