"""CBOR wire constants (RFC 8949)."""

from __future__ import annotations

import enum


class MajorType(enum.IntEnum):
    """Top 3 bits of an item's initial byte."""

    UNSIGNED_INT = 0
    NEGATIVE_INT = 1
    BYTE_STRING = 2
    TEXT_STRING = 3
    ARRAY = 4
    MAP = 5
    TAG = 6
    SIMPLE = 7


# Additional-info codes: N following big-endian bytes
AI_UINT8 = 24
AI_UINT16 = 25
AI_UINT32 = 26
AI_UINT64 = 27
AI_INDEFINITE = 31

# Largest value that fits directly in the additional-info field
MAX_INLINE = 23

# Simple values (major type 7)
SIMPLE_FALSE = 20
SIMPLE_TRUE = 21
SIMPLE_NULL = 22
SIMPLE_UNDEFINED = 23

# Float widths share additional-info codes with the integer widths
AI_FLOAT32 = AI_UINT32
AI_FLOAT64 = AI_UINT64

BREAK = (MajorType.SIMPLE << 5) | AI_INDEFINITE  # 0xFF

UINT64_MAX = 2**64 - 1
UINT32_MAX = 2**32 - 1

DEFAULT_CHUNK_SIZE = 250
# Room for the longest UTF-8 sequence
MIN_CHUNK_SIZE = 4
DEFAULT_MAX_DEPTH = 256
