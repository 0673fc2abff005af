"""Configuration for the CBOR encoder.

This module provides the configuration dataclass that controls the encoder's
limits and the handful of output choices that are not fixed by RFC 8949.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_DEPTH, MIN_CHUNK_SIZE, UINT32_MAX


@dataclass(frozen=True)
class EncoderConfig:
    """Configuration for an Encoder.

    Attributes:
        max_depth: Maximum nesting of arrays, maps and tagged values (default 256).
            Encoding a deeper value graph raises RecursionDepthExceeded instead
            of exhausting the interpreter stack.

        chunk_size: Indefinite-length string threshold in bytes (default 250).
            Strings shorter than this are written as a single definite-length
            item. Longer strings are written as an indefinite-length item made
            of definite-length chunks of at most chunk_size bytes, closed by a
            break byte. Text chunks end on UTF-8 character boundaries, so
            a chunk may be up to 3 bytes shorter. Minimum 4.

        nan_as_undefined: Emit the CBOR "undefined" simple value (0xF7) for NaN
            floats instead of a float NaN (default False). Only useful for
            byte-for-byte compatibility with older producers.

    Examples:
        ```python
        from cborredux import Encoder, EncoderConfig

        # Shallow documents only
        encoder = Encoder(config=EncoderConfig(max_depth=16))

        # Legacy byte output
        config = EncoderConfig(nan_as_undefined=True)
        ```
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    chunk_size: int = DEFAULT_CHUNK_SIZE
    nan_as_undefined: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

        if not MIN_CHUNK_SIZE <= self.chunk_size <= UINT32_MAX:
            raise ValueError(
                f"chunk_size must be {MIN_CHUNK_SIZE}-{UINT32_MAX}, got {self.chunk_size}"
            )
