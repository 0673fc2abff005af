"""End-to-end integration tests."""

from __future__ import annotations

import datetime
import enum
import logging
from typing import Any

import cbor2
import pytest
from pydantic import BaseModel, Field

from cborredux import (
    UNDEFINED,
    DateTimeString,
    Encoder,
    EncoderConfig,
    EpochDateTime,
    Float32,
    TaggedValue,
    datetime_replacer,
    encode,
    encoded_hex,
    encoded_size,
)


class MissionPhase(enum.Enum):
    """Mission phase enum."""

    STARTUP = 1
    TRANSIT = 2
    SURVEY = 3


class StatusReport(BaseModel):
    """Vehicle status report, serialized through model_dump()."""

    vehicle_id: int = Field(ge=0, le=255, description="Vehicle ID")
    mission_phase: MissionPhase
    depth_m: float
    battery_pct: int = Field(ge=0, le=100)
    emergency: bool
    notes: str = ""
    waypoints: list[tuple[float, float]] = Field(default_factory=list)


class TestRfcAppendixA:
    """Test mixed examples from RFC 8949 Appendix A."""

    @pytest.mark.parametrize(
        ("value", "expected_hex"),
        [
            ([], "80"),
            ({}, "a0"),
            ({1: 2, 3: 4}, "a201020304"),
            (["a", {"b": "c"}], "826161a161626163"),
            (
                {"a": "A", "b": "B", "c": "C", "d": "D", "e": "E"},
                "a56161614161626142616361436164614461656145",
            ),
            (TaggedValue(1, 1363896240), "c11a514b67b0"),
            (TaggedValue(1, 1363896240.5), "c1fb41d452d9ec200000"),
            (TaggedValue(32, "http://www.example.com"),
             "d82076687474703a2f2f7777772e6578616d706c652e636f6d"),
        ],
    )
    def test_vectors(self, value: Any, expected_hex: str) -> None:
        """Test byte-exact output."""
        assert encode(value).hex() == expected_hex


class TestWorkflows:
    """Test complete encode workflows checked with an independent decoder."""

    def test_pydantic_model_dump(self) -> None:
        """Test a pydantic model's python dump round-trips."""
        report = StatusReport(
            vehicle_id=42,
            mission_phase=MissionPhase.SURVEY,
            depth_m=125.5,
            battery_pct=87,
            emergency=False,
            notes="sonar sweep " * 30,
            waypoints=[(42.35, -71.06), (42.36, -71.05)],
        )
        payload = report.model_dump(mode="json")

        decoded = cbor2.loads(encode(payload))

        assert StatusReport.model_validate(decoded) == report

    def test_tagged_document(self) -> None:
        """Test a document with datetime tags under the datetime replacer."""
        when = datetime.datetime(2013, 3, 21, 20, 4, tzinfo=datetime.timezone.utc)
        document = {
            "created": DateTimeString(value=when),
            "updated": EpochDateTime(value=when),
            "ratio": Float32(0.5),
            "missing": UNDEFINED,
            "items": {0: "first", 1: "second"},
        }

        data = Encoder(replacer=datetime_replacer).encode(document)
        decoded = cbor2.loads(data)

        assert decoded["created"] == when
        assert decoded["updated"] == when
        assert decoded["ratio"] == 0.5
        assert decoded["missing"] is cbor2.undefined
        assert decoded["items"] == ["first", "second"]

    def test_long_unicode_text(self) -> None:
        """Test chunked multi-byte text is valid for a strict decoder."""
        text = "海底通信 🐋 " * 200

        data = encode(text)

        assert data[0] == 0x7F
        assert cbor2.loads(data) == text

    def test_custom_config(self) -> None:
        """Test a non-default configuration end to end."""
        config = EncoderConfig(max_depth=4, chunk_size=16, nan_as_undefined=True)
        value = {"text": "x" * 40, "nan": float("nan"), "nested": [[1]]}

        data = encode(value, config=config)
        decoded = cbor2.loads(data)

        assert decoded["text"] == "x" * 40
        assert decoded["nan"] is cbor2.undefined
        assert decoded["nested"] == [[1]]


class TestSizing:
    """Test size and hex helpers."""

    def test_encoded_size(self) -> None:
        """Test encoded_size matches the encoded length."""
        value = {"a": [1, 2, 3], "b": "x" * 300}

        assert encoded_size(23) == 1
        assert encoded_size(24) == 2
        assert encoded_size("x" * 300) == 306
        assert encoded_size(value) == len(encode(value))

    def test_encoded_hex(self) -> None:
        """Test hex rendering with and without a separator."""
        assert encoded_hex({"a": 1}) == "a1616101"
        assert encoded_hex({"a": 1}, sep=" ") == "a1 61 61 01"

    def test_sizing_honours_replacer(self) -> None:
        """Test the replacer affects the measured size."""
        value = TaggedValue(0, "x")

        assert encoded_size(value) == 3
        assert encoded_size(value, replacer=lambda tag, tagged: "x" * 30) == 1 + 2 + 30


class TestLogging:
    """Test debug logging."""

    def test_debug_records(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test encode and chunking are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="cborredux"):
            encode("x" * 300)

        messages = [record.getMessage() for record in caplog.records]
        assert "Chunking 300-byte string into 250-byte pieces" in messages
        assert "Encoded str to 306 bytes" in messages
