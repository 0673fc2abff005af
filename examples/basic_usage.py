#!/usr/bin/env python3
"""Basic usage example for cborredux.

This example demonstrates:
1. Encoding plain Python values
2. Long strings and indefinite-length chunking
3. Tagged values with a replacer
4. Limits and errors
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, Field

from cborredux import (
    CyclicValueError,
    DateTimeString,
    Encoder,
    EncoderConfig,
    Float32,
    TaggedValue,
    UnsupportedValueKind,
    datetime_replacer,
    encode,
    encoded_hex,
    encoded_size,
)


class StatusReport(BaseModel):
    """Vehicle status report."""

    vehicle_id: int = Field(ge=0, le=255, description="Vehicle ID (0-255)")
    depth_cm: int = Field(ge=0, le=10000, description="Depth in centimeters (0-100m)")
    battery_pct: int = Field(ge=0, le=100, description="Battery percentage (0-100)")
    active: bool = Field(description="Vehicle active flag")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("cborredux Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Plain values...")
    for value in (0, 23, 24, 256, -1, 1.5, Float32(1.5), "IETF", [10, 20, 30], {"a": 1}):
        print(f"   {value!r:>16} -> {encoded_hex(value, sep=' ')}")
    print()

    print("2. A pydantic model via model_dump()...")
    msg = StatusReport(vehicle_id=42, depth_cm=2500, battery_pct=87, active=True)
    data = encode(msg.model_dump())
    print(f"   {len(data)} bytes: {data.hex()}")
    print()

    print("3. Long strings are chunked...")
    text = "x" * 300
    print(f"   300-char string -> {encoded_size(text)} bytes (0x7F ... 0xFF)")
    small = EncoderConfig(chunk_size=8)
    print(f"   chunk_size=8: {encoded_hex('abcdefghijkl', config=small, sep=' ')}")
    print()

    print("4. Tagged values...")
    print(f"   identity: {encoded_hex(TaggedValue(0, '2013-03-21T20:04:00Z'))}")
    when = datetime.datetime(2013, 3, 21, 20, 4, tzinfo=datetime.timezone.utc)
    encoder = Encoder(replacer=datetime_replacer)
    print(f"   datetime: {encoder.encode(DateTimeString(value=when)).hex()}")
    print()

    print("5. Errors...")
    cyclic: list[object] = []
    cyclic.append(cyclic)
    for bad in ({1, 2}, cyclic):
        try:
            encode(bad)
        except (UnsupportedValueKind, CyclicValueError) as e:
            print(f"   {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
