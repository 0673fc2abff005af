"""Marker types for values Python has no native spelling for.

CBOR distinguishes single from double precision floats and has an
"undefined" simple value separate from null. Plain Python values cannot
express either, so these small types let callers ask for them explicitly.
"""

from __future__ import annotations

from typing import Any


class Float32(float):
    """A float to be encoded in IEEE-754 single precision (0xFA).

    Plain ``float`` values are always encoded in double precision. Wrap a
    value in Float32 to trade precision for 4 bytes of output.

    Example:
        >>> encode(Float32(1.5)).hex()
        'fa3fc00000'
    """

    def __repr__(self) -> str:
        return f"Float32({float(self)!r})"


class Undefined:
    """The CBOR "undefined" simple value (0xF7).

    Use the module-level ``UNDEFINED`` singleton; constructing the class again
    returns the same instance.
    """

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[Any, ...]:
        return (Undefined, ())


UNDEFINED = Undefined()
