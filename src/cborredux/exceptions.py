"""Exception hierarchy for cborredux.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from CborReduxError for easy catching of any cborredux-specific error.
"""

from __future__ import annotations


class CborReduxError(Exception):
    """Base exception for all cborredux errors."""

    pass


class EncodeError(CborReduxError):
    """Raised when encoding a value fails.

    Examples:
        - Value kind has no CBOR representation
        - Integer outside the 64-bit CBOR range
        - Value graph nested too deeply or containing a cycle
        - Float32 value outside single-precision range
    """

    pass


class UnsupportedValueKind(EncodeError):
    """Raised when a value has no CBOR mapping (e.g. a set or an arbitrary object)."""

    def __init__(self, value: object) -> None:
        self.value_type = type(value)
        super().__init__(f"Cannot encode value of type {self.value_type.__qualname__}")


class IntegerOverflow(EncodeError):
    """Raised when an integer is outside -2**64 .. 2**64-1."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Integer {value} is outside the 64-bit CBOR range")


class RecursionDepthExceeded(EncodeError):
    """Raised when containers and tags nest deeper than EncoderConfig.max_depth."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Value nesting exceeds max_depth={max_depth}")


class CyclicValueError(EncodeError):
    """Raised when a container (directly or indirectly) contains itself."""

    def __init__(self, value: object) -> None:
        self.value_type = type(value)
        super().__init__(
            f"Cyclic reference detected in {self.value_type.__qualname__} "
            f"at id=0x{id(value):x}"
        )
